"""Quote aggregation and the engine entry point."""

import logging
from typing import Optional

from rentquote.exceptions import InvalidDateRangeError
from rentquote.models.listing import ListingBase
from rentquote.models.quote import DateRange, Quote, round2
from rentquote.services.common import listing_from_dict, parse_when
from rentquote.services.duration import compute_duration
from rentquote.services.rates import select_rate
from rentquote.utils.constants import SERVICE_FEE_RATE, TAX_RATE

logger = logging.getLogger(__name__)


def build_quote(base_cost: float, listing: ListingBase, duration_days: int,
                rate_basis: Optional[str] = None) -> Quote:
    """
    Apply the fixed fee model to a base cost:
      service fee 5%, tax 13%, plus the listing's security deposit.
    A zero-day duration yields the empty quote (deposit not charged).
    """
    if duration_days == 0:
        return Quote.empty()

    service_fee = base_cost * SERVICE_FEE_RATE
    tax = base_cost * TAX_RATE
    deposit = listing.security_deposit
    return Quote(
        duration_days=duration_days,
        base_cost=base_cost,
        service_fee=service_fee,
        tax=tax,
        deposit=deposit,
        grand_total=base_cost + service_fee + tax + deposit,
        rate_basis=rate_basis,
    )


def compute_quote(listing: ListingBase, date_range: Optional[DateRange] = None) -> Quote:
    """
    Price `listing` over `date_range`.
    Missing range or missing start/end -> empty quote, never an error.
    """
    if date_range is None or not date_range.is_complete:
        return Quote.empty()

    days = compute_duration(date_range.start, date_range.end)
    sel = select_rate(listing, days)
    quote = build_quote(sel.base_cost, listing, duration_days=days, rate_basis=sel.rate_basis)
    logger.debug("quote: %d day(s), grand total %.2f", quote.duration_days, quote.grand_total)
    return quote


def booking_details(quote: Quote, date_range: DateRange) -> dict:
    """
    Payload handed to the booking-submission collaborator.
    Only a priced quote can be booked.
    """
    if quote.is_empty or date_range is None or not date_range.is_complete:
        raise InvalidDateRangeError("Error: select a start and end date before booking")
    return {
        "startDate": date_range.start.isoformat(),
        "endDate": date_range.end.isoformat(),
        "duration": quote.duration_days,
        "totalCost": round2(quote.base_cost),
        "grandTotal": round2(quote.grand_total),
    }


class QuoteService:
    """
    Quote operations used by the controllers.
    Stateless: every call recomputes from its arguments.
    """

    @staticmethod
    def compute_quote(listing: ListingBase, date_range: Optional[DateRange] = None) -> Quote:
        return compute_quote(listing, date_range)

    @staticmethod
    def quote_from_payload(payload: dict, tz_name: str = "UTC"):
        """
        Build (listing, date_range, quote) from a request body:
          {"listing": {...}, "startDate": "...", "endDate": "..."}
        Raises InvalidListingError / InvalidDateRangeError on bad input.
        """
        listing = listing_from_dict(payload.get("listing"))
        date_range = DateRange(
            start=parse_when(payload.get("startDate"), tz_name),
            end=parse_when(payload.get("endDate"), tz_name),
        )
        return listing, date_range, compute_quote(listing, date_range)

    @staticmethod
    def booking_details(quote: Quote, date_range: DateRange) -> dict:
        return booking_details(quote, date_range)
