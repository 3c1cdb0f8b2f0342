from dataclasses import dataclass
from datetime import date
from typing import Optional

from rentquote.utils.constants import RATE_LABELS


def round2(x: float) -> float:
    return round(float(x), 2)


@dataclass(frozen=True)
class DateRange:
    """
    Requested rental window. Either end may be missing while the renter is
    still picking dates; such a range prices to the empty quote.
    Values are datetime.date or datetime.datetime.
    """
    start: Optional[date] = None
    end: Optional[date] = None

    @property
    def is_complete(self) -> bool:
        return self.start is not None and self.end is not None


@dataclass(frozen=True)
class RateSelection:
    base_cost: float
    rate_basis: Optional[str]  # None when nothing was priced


@dataclass(frozen=True)
class Quote:
    """
    Priced breakdown for one listing and date range.
    A quote with duration_days == 0 is the "no active quote" state: every
    amount, deposit included, is zero and there is no rate basis.
    """
    duration_days: int
    base_cost: float
    service_fee: float
    tax: float
    deposit: float
    grand_total: float
    rate_basis: Optional[str] = None

    @classmethod
    def empty(cls) -> "Quote":
        return cls(
            duration_days=0,
            base_cost=0.0,
            service_fee=0.0,
            tax=0.0,
            deposit=0.0,
            grand_total=0.0,
            rate_basis=None,
        )

    @property
    def is_empty(self) -> bool:
        return self.duration_days == 0

    @property
    def rate_label(self) -> Optional[str]:
        """Banner text for discounted tiers, e.g. 'Weekly Rate Applied'."""
        return RATE_LABELS.get(self.rate_basis)

    def to_dict(self) -> dict:
        """JSON-ready view; amounts are rounded to cents for display."""
        return {
            "durationDays": self.duration_days,
            "baseCost": round2(self.base_cost),
            "serviceFee": round2(self.service_fee),
            "tax": round2(self.tax),
            "deposit": round2(self.deposit),
            "grandTotal": round2(self.grand_total),
            "rateBasis": self.rate_basis,
            "rateLabel": self.rate_label,
        }
