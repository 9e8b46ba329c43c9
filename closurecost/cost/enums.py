"""
cost/enums.py - Cost estimation enumerations.

Categories group line items for presentation only; no calculation
branches on them.
"""

from enum import Enum
from typing import Dict


class CostCategory(str, Enum):
    """Cost line categories."""
    MOBILISATION = "mobilisation"
    SITE_ESTABLISHMENT = "site_establishment"
    DEMOLITION = "demolition"
    EARTHWORKS = "earthworks"
    TSF_CLOSURE = "tsf_closure"
    WRD_REHABILITATION = "wrd_rehabilitation"
    WATER_TREATMENT_CAPEX = "water_treatment_capex"
    WATER_TREATMENT_OPEX = "water_treatment_opex"
    REVEGETATION = "revegetation"
    EROSION_CONTROLS = "erosion_controls"
    ROAD_REHABILITATION = "road_rehabilitation"
    HAZARDOUS_MATERIALS = "hazardous_materials"
    MONITORING = "monitoring"
    COMMUNITY_HERITAGE = "community_heritage"
    CONTINGENCY = "contingency"
    RISK_UPLIFT = "risk_uplift"
    OWNERS_COSTS = "owners_costs"
    CONTRACTOR_MARGIN = "contractor_margin"


CATEGORY_NAMES: Dict[CostCategory, str] = {
    CostCategory.MOBILISATION: "Mobilisation/Demobilisation",
    CostCategory.SITE_ESTABLISHMENT: "Site Establishment & HSE",
    CostCategory.DEMOLITION: "Demolition & Removal",
    CostCategory.EARTHWORKS: "Earthworks & Landform",
    CostCategory.TSF_CLOSURE: "TSF Closure",
    CostCategory.WRD_REHABILITATION: "WRD Rehabilitation",
    CostCategory.WATER_TREATMENT_CAPEX: "Water Treatment (Capex)",
    CostCategory.WATER_TREATMENT_OPEX: "Water Treatment (Opex)",
    CostCategory.REVEGETATION: "Revegetation",
    CostCategory.EROSION_CONTROLS: "Erosion & Sediment Controls",
    CostCategory.ROAD_REHABILITATION: "Road Rehabilitation",
    CostCategory.HAZARDOUS_MATERIALS: "Hazardous Materials",
    CostCategory.MONITORING: "Monitoring",
    CostCategory.COMMUNITY_HERITAGE: "Community & Heritage",
    CostCategory.CONTINGENCY: "Contingency",
    CostCategory.RISK_UPLIFT: "Risk Uplift",
    CostCategory.OWNERS_COSTS: "Owner's Costs",
    CostCategory.CONTRACTOR_MARGIN: "Contractor Margin",
}
