"""
tests/unit/test_schedule_cashflow.py - Tests for annual cashflow distribution.
"""

import pytest
from closurecost.core.enums import ClosurePhase
from closurecost.cost.enums import CostCategory
from closurecost.cost.schema import LineItemCost
from closurecost.inputs.schema import PhaseDurations
from closurecost.schedule.cashflow import calculate_annual_cashflows, distribute_line_items
from closurecost.schedule.phases import build_phase_schedule


def item(subtotal, phase, category=CostCategory.MOBILISATION):
    return LineItemCost(
        category=category,
        description="test",
        quantity=1,
        unit="lump sum",
        unit_rate=subtotal,
        subtotal=subtotal,
        phase=phase,
    )


class TestDistribution:
    """Tests for distribute_line_items."""

    def test_bucket_count(self):
        """Total duration D gives D + 1 buckets."""
        schedule = build_phase_schedule(PhaseDurations())
        assert len(distribute_line_items([], schedule)) == 28

    def test_even_spread(self):
        """A phase subtotal is spread evenly over its years."""
        schedule = build_phase_schedule(PhaseDurations())
        buckets = distribute_line_items(
            [item(900.0, ClosurePhase.EARTHWORKS_LANDFORM)], schedule,
        )
        values = [b[ClosurePhase.EARTHWORKS_LANDFORM] for b in buckets]
        assert values[4:7] == [300.0, 300.0, 300.0]
        assert sum(values) == pytest.approx(900.0)
        assert values[3] == 0 and values[7] == 0

    def test_zero_duration_lands_in_start_year(self):
        """A zero-duration phase books its whole subtotal in its start year."""
        schedule = build_phase_schedule(PhaseDurations(decommissioning_demolition=0))
        buckets = distribute_line_items(
            [item(500.0, ClosurePhase.DECOMMISSIONING_DEMOLITION)], schedule,
        )
        assert buckets[2][ClosurePhase.DECOMMISSIONING_DEMOLITION] == 500.0
        assert sum(b[ClosurePhase.DECOMMISSIONING_DEMOLITION] for b in buckets) == 500.0

    def test_every_bucket_has_all_phases(self):
        """Buckets carry every phase, zero-filled."""
        schedule = build_phase_schedule(PhaseDurations())
        for bucket in distribute_line_items([], schedule):
            assert len(bucket) == 8
            assert all(v == 0.0 for v in bucket.values())

    def test_all_zero_durations(self):
        """All-zero durations put everything into year 0."""
        schedule = build_phase_schedule(PhaseDurations(0, 0, 0, 0, 0, 0, 0, 0))
        buckets = distribute_line_items(
            [item(100.0, ClosurePhase.PLANNING_APPROVALS),
             item(50.0, ClosurePhase.RELINQUISHMENT_POSTCLOSURE)],
            schedule,
        )
        assert len(buckets) == 1
        assert sum(buckets[0].values()) == 150.0


class TestAnnualCashflows:
    """Tests for calculate_annual_cashflows."""

    def test_years_are_absolute(self, default_inputs):
        """Year labels run from closure start year."""
        cashflows = calculate_annual_cashflows([], default_inputs)
        assert cashflows[0].year == 2026
        assert cashflows[-1].year == 2026 + 27

    def test_no_items_all_zero(self, default_inputs):
        """No line items gives zero cashflows."""
        cashflows = calculate_annual_cashflows([], default_inputs)
        assert all(cf.nominal_cost == 0 for cf in cashflows)
        assert cashflows[-1].cumulative_discounted == 0

    def test_escalation_then_discount(self, default_inputs):
        """escalated = nominal x 1.03^t; discounted = escalated / 1.07^t."""
        cashflows = calculate_annual_cashflows(
            [item(1000.0, ClosurePhase.EARTHWORKS_LANDFORM)], default_inputs,
        )
        cf = cashflows[5]
        assert cf.nominal_cost == pytest.approx(1000.0 / 3)
        assert cf.escalated_cost == pytest.approx(1000.0 / 3 * 1.03 ** 5)
        assert cf.discounted_cost == pytest.approx(1000.0 / 3 * 1.03 ** 5 / 1.07 ** 5)

    def test_year_zero_unadjusted(self, default_inputs):
        """Year 0 is neither escalated nor discounted."""
        cashflows = calculate_annual_cashflows(
            [item(400.0, ClosurePhase.PLANNING_APPROVALS)], default_inputs,
        )
        cf = cashflows[0]
        assert cf.nominal_cost == cf.escalated_cost == cf.discounted_cost == 200.0

    def test_cumulative_running_sums(self, default_inputs):
        """Cumulative columns are running sums."""
        cashflows = calculate_annual_cashflows(
            [item(1000.0, ClosurePhase.MONITORING_MAINTENANCE)], default_inputs,
        )
        running_nominal = 0.0
        running_discounted = 0.0
        for cf in cashflows:
            running_nominal += cf.nominal_cost
            running_discounted += cf.discounted_cost
            assert cf.cumulative_nominal == pytest.approx(running_nominal)
            assert cf.cumulative_discounted == pytest.approx(running_discounted)
        assert cashflows[-1].cumulative_nominal == pytest.approx(1000.0)

    def test_zero_rates_leave_costs_unchanged(self, zero_rate_inputs):
        """With zero escalation and discount, all three cost columns agree."""
        cashflows = calculate_annual_cashflows(
            [item(900.0, ClosurePhase.REVEGETATION_ECOSYSTEM)], zero_rate_inputs,
        )
        for cf in cashflows:
            assert cf.escalated_cost == cf.nominal_cost
            assert cf.discounted_cost == cf.nominal_cost

    def test_discount_mode_has_no_effect(self, default_inputs):
        """Real and nominal mode discount identically."""
        items = [item(1000.0, ClosurePhase.WATER_MANAGEMENT)]
        real = calculate_annual_cashflows(items, default_inputs)
        nominal = calculate_annual_cashflows(
            items, default_inputs.replace("financial_params.discount_rate_mode", "nominal"),
        )
        assert [cf.discounted_cost for cf in real] == [cf.discounted_cost for cf in nominal]

    def test_phase_breakdown_per_year(self, default_inputs):
        """Each year's nominal cost equals the sum of its phase breakdown."""
        cashflows = calculate_annual_cashflows(
            [item(300.0, ClosurePhase.EARTHWORKS_LANDFORM),
             item(600.0, ClosurePhase.TAILINGS_WRD_REHABILITATION)],
            default_inputs,
        )
        cf = cashflows[4]
        assert cf.phase_breakdown[ClosurePhase.EARTHWORKS_LANDFORM] == pytest.approx(100.0)
        assert cf.phase_breakdown[ClosurePhase.TAILINGS_WRD_REHABILITATION] == pytest.approx(200.0)
        assert cf.nominal_cost == pytest.approx(sum(cf.phase_breakdown.values()))
