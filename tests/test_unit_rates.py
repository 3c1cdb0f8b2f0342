import pytest

from rentquote.exceptions import RateSelectionError
from rentquote.models.listing import VehicleListing, PropertyListing
from rentquote.services.rates import select_rate, evaluate_rules
from rentquote.utils.constants import RateBasis


def test_monthly_tier_wins_at_thirty_days(vehicle):
    sel = select_rate(vehicle, 30)
    assert sel.rate_basis == RateBasis.MONTHLY
    assert sel.base_cost == pytest.approx(10000)


def test_zero_monthly_rate_falls_back_to_weekly():
    v = VehicleListing(daily_rate=500, weekly_rate=3000, monthly_rate=0)
    sel = select_rate(v, 30)
    assert sel.rate_basis == RateBasis.WEEKLY
    assert sel.base_cost == pytest.approx(12857.142857, rel=1e-9)


def test_weekly_tier_is_prorated_not_bucketed(vehicle):
    # 9 days = 9/7 of a week, not 1 week + 2 days
    sel = select_rate(vehicle, 9)
    assert sel.rate_basis == RateBasis.WEEKLY
    assert sel.base_cost == pytest.approx(3000 / 7 * 9)


def test_short_trip_uses_daily_rate(vehicle):
    sel = select_rate(vehicle, 6)
    assert sel.rate_basis == RateBasis.DAILY
    assert sel.base_cost == pytest.approx(3000)


def test_missing_tiers_fall_through_to_daily():
    v = VehicleListing(daily_rate=450)
    sel = select_rate(v, 45)
    assert sel.rate_basis == RateBasis.DAILY
    assert sel.base_cost == pytest.approx(450 * 45)


def test_zero_weekly_rate_is_not_a_tier():
    v = VehicleListing(daily_rate=500, weekly_rate=0, monthly_rate=None)
    assert select_rate(v, 10).rate_basis == RateBasis.DAILY


def test_property_is_prorated_on_a_thirty_day_month(apartment):
    sel = select_rate(apartment, 10)
    assert sel.rate_basis == RateBasis.MONTHLY_PRORATED
    assert sel.base_cost == pytest.approx(10000)

    # 31 days is more than one "month"
    assert select_rate(apartment, 31).base_cost == pytest.approx(31000)


def test_zero_days_prices_nothing(vehicle, apartment):
    for listing in (vehicle, apartment):
        sel = select_rate(listing, 0)
        assert sel.base_cost == 0
        assert sel.rate_basis is None


def test_rules_evaluate_in_priority_order():
    rules = [
        (lambda d: d > 5, "long", lambda d: d * 1.0),
        (lambda d: d > 2, "medium", lambda d: d * 2.0),
        (lambda d: True, "short", lambda d: d * 3.0),
    ]
    assert evaluate_rules(rules, 10).rate_basis == "long"
    assert evaluate_rules(rules, 3).rate_basis == "medium"
    assert evaluate_rules(rules, 1).base_cost == 3.0


def test_no_matching_rule_raises():
    with pytest.raises(RateSelectionError):
        evaluate_rules([(lambda d: d > 100, "x", lambda d: 0.0)], 3)
