"""Shared service helpers: parsers and dict -> model mappers."""

import re
from datetime import date, datetime
from typing import Optional, Union

import pytz

from rentquote.exceptions import InvalidListingError, InvalidDateRangeError
from rentquote.models.listing import ListingBase, PropertyListing, VehicleListing
from rentquote.utils.constants import DATE_FMT, AssetKind, ALLOWED_KINDS, VEHICLE_TYPE_ALIASES

_NON_NUMERIC = re.compile(r"[^0-9.]")
_STRAY_DOT = re.compile(r"(?<=[^\d\s,])\.|\.(?!\d)")


# -------- date helpers --------
def parse_date(s: str) -> date:
    """Parse YYYY-MM-DD string to date."""
    return datetime.strptime(s, DATE_FMT).date()


def parse_when(value, tz_name: str = "UTC") -> Optional[Union[date, datetime]]:
    """
    Parse booking-form date text.
    Supports:
      - 'YYYY-MM-DD'                         -> date
      - 'YYYY-MM-DDTHH:MM[:SS]' / space form -> datetime in `tz_name`
      - Above with 'Z' or offsets like '+05:45'
    Empty/None -> None. Anything else raises InvalidDateRangeError.
    """
    if value is None:
        return None
    if isinstance(value, (date, datetime)):
        return value

    s = str(value).strip()
    if not s:
        return None

    try:
        tz = pytz.timezone(tz_name)
    except pytz.UnknownTimeZoneError:
        raise InvalidDateRangeError(f"Error: unknown timezone {tz_name!r}")

    if "T" not in s and " " not in s:
        try:
            return parse_date(s)
        except ValueError:
            raise InvalidDateRangeError(f"Error: invalid date {s!r} (YYYY-MM-DD)")

    s_norm = s.replace("T", " ")
    if s_norm.endswith("Z"):
        s_norm = s_norm[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(s_norm)
    except ValueError:
        raise InvalidDateRangeError(f"Error: invalid date {s!r}")

    # Naive input is wall-clock time in the configured zone
    if dt.tzinfo is None:
        return tz.localize(dt)
    return dt.astimezone(tz)


# -------- numeric helpers --------
def parse_amount(value, field: str) -> Optional[float]:
    """
    Convert a listing amount to float; None/'' means absent.
    Currency text such as 'Rs 30,000' is accepted: everything but digits
    and '.' is dropped first.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return float(value)
    raw = str(value).strip()
    if raw.startswith("-"):
        raise InvalidListingError(f"Error: {field} must be a non-negative number")
    # the dot of "Rs. 500" / "Rs.500" is not a decimal point
    s = _NON_NUMERIC.sub("", _STRAY_DOT.sub("", raw))
    if not s:
        return None
    try:
        return float(s)
    except ValueError:
        raise InvalidListingError(f"Error: {field} is not a number ({value!r})")


def _pick(d: dict, *keys):
    """First present, non-empty value among `keys`."""
    for k in keys:
        v = d.get(k)
        if v is not None and v != "":
            return v
    return None


def _lc(s):
    """Safe lowercase for case-insensitive compare; non-strings count as empty."""
    return s.strip().lower() if isinstance(s, str) else ""


# -------- dict -> rich model mappers --------
def asset_kind_of(d: dict) -> str:
    """
    Resolve the asset kind of a raw listing record.
    Explicit 'assetKind'/'asset_kind' wins; otherwise a 'type' of bike/car
    or the presence of a daily rate marks a vehicle.
    """
    raw_kind = _pick(d, "assetKind", "asset_kind")
    if raw_kind is not None and not isinstance(raw_kind, str):
        raise InvalidListingError(f"Error: unknown asset kind {raw_kind!r}")
    kind = _lc(raw_kind)
    if kind:
        if kind not in ALLOWED_KINDS:
            raise InvalidListingError(f"Error: unknown asset kind {kind!r}")
        return kind
    if _lc(d.get("type")) in VEHICLE_TYPE_ALIASES:
        return AssetKind.VEHICLE
    if _pick(d, "dailyRate", "daily_rate") is not None:
        return AssetKind.VEHICLE
    return AssetKind.PROPERTY


def listing_from_dict(d: Optional[dict]) -> ListingBase:
    """Map a raw listing record (camelCase or snake_case) to a validated listing."""
    if not d or not isinstance(d, dict):
        raise InvalidListingError("Error: listing is required")

    deposit = parse_amount(_pick(d, "securityDeposit", "security_deposit"), "securityDeposit")
    base = dict(security_deposit=deposit or 0.0)

    if asset_kind_of(d) == AssetKind.VEHICLE:
        return VehicleListing(
            daily_rate=parse_amount(_pick(d, "dailyRate", "daily_rate"), "dailyRate"),
            weekly_rate=parse_amount(_pick(d, "weeklyRate", "weekly_rate"), "weeklyRate"),
            monthly_rate=parse_amount(_pick(d, "monthlyRate", "monthly_rate"), "monthlyRate"),
            **base,
        )
    return PropertyListing(
        monthly_rent=parse_amount(_pick(d, "monthlyRent", "monthly_rent", "rentPrice"), "monthlyRent"),
        **base,
    )
