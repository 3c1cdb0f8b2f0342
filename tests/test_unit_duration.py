from datetime import date, datetime, timedelta

import pytz

from rentquote.services.duration import compute_duration


def test_same_day_is_zero():
    d = date(2030, 1, 10)
    assert compute_duration(d, d) == 0


def test_whole_days_between_dates():
    assert compute_duration(date(2030, 1, 1), date(2030, 1, 31)) == 30
    assert compute_duration(date(2030, 2, 1), date(2030, 3, 1)) == 28


def test_partial_day_rounds_up():
    start = datetime(2030, 1, 1, 0, 0)
    assert compute_duration(start, start + timedelta(hours=36)) == 2
    assert compute_duration(start, start + timedelta(minutes=1)) == 1
    assert compute_duration(start, start + timedelta(days=2)) == 2


def test_order_does_not_matter():
    a = datetime(2030, 5, 3, 8, 30)
    b = datetime(2030, 5, 9, 20, 0)
    assert compute_duration(a, b) == compute_duration(b, a) == 7
    assert compute_duration(date(2030, 1, 31), date(2030, 1, 1)) == 30


def test_date_and_datetime_mix():
    # plain date counts from midnight
    assert compute_duration(date(2030, 1, 1), datetime(2030, 1, 2, 6, 0)) == 2


def test_aware_and_naive_mix_uses_the_aware_zone():
    ktm = pytz.timezone("Asia/Kathmandu")
    start = ktm.localize(datetime(2030, 1, 1, 10, 0))
    end = datetime(2030, 1, 2, 10, 0)
    assert compute_duration(start, end) == 1
