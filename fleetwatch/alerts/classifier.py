"""Pure severity classification and days-remaining arithmetic.

Severity is decided on whole calendar days: a document that expires today
(or earlier) is always critical, otherwise the day count is compared against
the kind's critical and warning windows, both inclusive. Days remaining keeps
sub-day precision when both sides carry a time of day and rounds away from
zero, so "4.2 days away" reads as 5 and "3 hours late" reads as -1.
"""

from __future__ import annotations

import math
from datetime import UTC, date, datetime, timedelta

from fleetwatch.alerts.policy import DEFAULT_POLICY, ThresholdPolicy
from fleetwatch.core.types import DocumentKind, SeverityLevel

DateLike = date | datetime

_ONE_DAY = timedelta(days=1)


def _as_day(value: DateLike) -> date:
    # datetime subclasses date, so test it first.
    if isinstance(value, datetime):
        return value.date()
    return value


def _naive_utc(value: datetime) -> datetime:
    return value.astimezone(UTC).replace(tzinfo=None)


def _align(expiry: datetime, now: datetime) -> tuple[datetime, datetime]:
    """Make two datetimes comparable; a naive side is taken as UTC."""
    expiry_aware = expiry.tzinfo is not None
    now_aware = now.tzinfo is not None
    if expiry_aware == now_aware:
        return expiry, now
    if expiry_aware:
        return _naive_utc(expiry), now
    return expiry, _naive_utc(now)


def _calendar_days(expiry: DateLike, now: DateLike) -> tuple[date, date]:
    if isinstance(expiry, datetime) and isinstance(now, datetime):
        expiry, now = _align(expiry, now)
    return _as_day(expiry), _as_day(now)


def classify(
    expiry: DateLike | None,
    kind: DocumentKind,
    now: DateLike,
    policy: ThresholdPolicy = DEFAULT_POLICY,
) -> SeverityLevel:
    """Return the severity of a deadline relative to *now*.

    Anything due today or earlier is CRITICAL regardless of the windows.
    A missing expiry is OK (nothing tracked).
    """
    if expiry is None:
        return SeverityLevel.OK

    expiry_day, today = _calendar_days(expiry, now)
    if expiry_day <= today:
        return SeverityLevel.CRITICAL

    days_out = (expiry_day - today).days
    thresholds = policy.lookup(kind)
    if days_out <= thresholds.critical_days:
        return SeverityLevel.CRITICAL
    if days_out <= thresholds.warning_days:
        return SeverityLevel.WARNING
    return SeverityLevel.OK


def days_remaining(expiry: DateLike, now: DateLike) -> int:
    """Signed whole days until *expiry*: 0 = due now, negative = overdue.

    When either side is a plain date the result is the exact calendar-day
    difference. When both are datetimes the fractional difference is
    rounded away from zero (ceiling of its magnitude).
    """
    if not (isinstance(expiry, datetime) and isinstance(now, datetime)):
        return (_as_day(expiry) - _as_day(now)).days

    expiry, now = _align(expiry, now)
    fraction = (expiry - now) / _ONE_DAY
    if fraction < 0:
        return -math.ceil(-fraction)
    return math.ceil(fraction)
