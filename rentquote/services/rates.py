"""Pick the pricing tier for a listing and duration."""

import logging
from typing import Iterable

from rentquote.exceptions import RateSelectionError
from rentquote.models.listing import ListingBase, RateRule
from rentquote.models.quote import RateSelection

logger = logging.getLogger(__name__)


def evaluate_rules(rules: Iterable[RateRule], duration_days: int) -> RateSelection:
    """
    Walk (predicate, basis, cost_fn) rules in priority order; first match wins.
    Raises RateSelectionError when the list has no catch-all rule.
    """
    for matches, basis, cost in rules:
        if matches(duration_days):
            return RateSelection(base_cost=float(cost(duration_days)), rate_basis=basis)
    raise RateSelectionError(f"Error: no pricing rule matched {duration_days} day(s)")


def select_rate(listing: ListingBase, duration_days: int) -> RateSelection:
    """
    Base cost for `duration_days` of `listing`.
    Zero days prices nothing and carries no basis.
    """
    if duration_days == 0:
        return RateSelection(base_cost=0.0, rate_basis=None)

    sel = evaluate_rules(listing.rate_rules(), duration_days)
    logger.debug("%s listing, %d day(s): %s basis, base %.2f",
                 listing.asset_kind, duration_days, sel.rate_basis, sel.base_cost)
    return sel
