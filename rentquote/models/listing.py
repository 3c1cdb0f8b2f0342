from dataclasses import dataclass
from typing import Callable, List, Optional, Tuple

from rentquote.exceptions import InvalidListingError
from rentquote.utils.constants import AssetKind, RateBasis, MONTH_DAYS, WEEK_DAYS

# (predicate(days) -> bool, rate basis, cost(days) -> float)
RateRule = Tuple[Callable[[int], bool], str, Callable[[int], float]]


def _check_amount(name: str, value, required: bool = False) -> Optional[float]:
    """Reject missing (when required), non-numeric, or negative amounts."""
    if value is None:
        if required:
            raise InvalidListingError(f"Error: {name} is required")
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidListingError(f"Error: {name} must be a number")
    if value != value or value < 0:  # NaN or negative
        raise InvalidListingError(f"Error: {name} must be a non-negative number")
    return float(value)


@dataclass(frozen=True)
class ListingBase:
    """
    Base listing model. Holds the fields every asset kind shares.
    Subclasses supply their pricing tiers through rate_rules().
    """
    security_deposit: float = 0.0

    asset_kind = None  # set by subclasses

    def __post_init__(self):
        deposit = _check_amount("securityDeposit", self.security_deposit)
        object.__setattr__(self, "security_deposit", deposit or 0.0)

    def rate_rules(self) -> List[RateRule]:
        """
        Ordered pricing rules, highest priority first.
        The last rule of a concrete listing must always match.
        """
        return []


@dataclass(frozen=True)
class PropertyListing(ListingBase):
    """
    Properties are rented by period: the monthly rent is prorated per day
    over a fixed thirty-day month.
    """
    monthly_rent: float = None

    asset_kind = AssetKind.PROPERTY

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "monthly_rent", _check_amount("monthlyRent", self.monthly_rent, required=True))

    def rate_rules(self) -> List[RateRule]:
        return [
            (lambda days: True, RateBasis.MONTHLY_PRORATED,
             lambda days: (self.monthly_rent / MONTH_DAYS) * days),
        ]


@dataclass(frozen=True)
class VehicleListing(ListingBase):
    """
    Vehicles are rented by trip. Longer trips unlock a cheaper blended
    per-day rate once they cross the weekly or monthly threshold.
    A zero weekly/monthly rate counts as "no such tier".
    """
    daily_rate: float = None
    weekly_rate: Optional[float] = None
    monthly_rate: Optional[float] = None

    asset_kind = AssetKind.VEHICLE

    def __post_init__(self):
        super().__post_init__()
        object.__setattr__(self, "daily_rate", _check_amount("dailyRate", self.daily_rate, required=True))
        object.__setattr__(self, "weekly_rate", _check_amount("weeklyRate", self.weekly_rate))
        object.__setattr__(self, "monthly_rate", _check_amount("monthlyRate", self.monthly_rate))

    def rate_rules(self) -> List[RateRule]:
        monthly = self.monthly_rate or 0.0
        weekly = self.weekly_rate or 0.0
        return [
            (lambda days: days >= MONTH_DAYS and monthly > 0, RateBasis.MONTHLY,
             lambda days: (monthly / MONTH_DAYS) * days),
            (lambda days: days >= WEEK_DAYS and weekly > 0, RateBasis.WEEKLY,
             lambda days: (weekly / WEEK_DAYS) * days),
            (lambda days: True, RateBasis.DAILY,
             lambda days: self.daily_rate * days),
        ]
