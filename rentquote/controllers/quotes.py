from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from ..exceptions import InvalidListingError, InvalidDateRangeError
from ..services.quote_service import QuoteService

bp = Blueprint("quotes", __name__, url_prefix="/api")


def _payload() -> dict:
    """JSON body of the request; anything but an object is a bad request."""
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise BadRequest("Error: expected a JSON object body")
    return data


def _error(msg: str, status: int = 400):
    current_app.logger.warning("quote request rejected: %s", msg)
    return jsonify(ok=False, error=msg), status


@bp.errorhandler(BadRequest)
def bad_request(e):
    return _error(e.description or "Error: bad request")


@bp.get("/health")
def health():
    return jsonify(ok=True)


@bp.post("/quote")
def quote():
    """
    Price a listing for the selected dates.
    Missing dates are not an error: the empty quote comes back so the
    booking modal can clear its breakdown.
    """
    try:
        _, _, q = QuoteService.quote_from_payload(_payload(), current_app.config["QUOTE_TIMEZONE"])
    except (InvalidListingError, InvalidDateRangeError) as e:
        return _error(e.message)
    return jsonify(ok=True, quote=q.to_dict())


@bp.post("/booking-details")
def booking_details():
    """Booking payload (dates, duration, totals) for a priced quote."""
    try:
        _, dr, q = QuoteService.quote_from_payload(_payload(), current_app.config["QUOTE_TIMEZONE"])
        booking = QuoteService.booking_details(q, dr)
    except (InvalidListingError, InvalidDateRangeError) as e:
        return _error(e.message)
    return jsonify(ok=True, booking=booking)
