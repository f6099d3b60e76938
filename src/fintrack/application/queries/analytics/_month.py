from fintrack.domain.analytics.value_objects import Period
from fintrack.domain.shared.time import today_utc


def resolve_period(month: str | None, field: str = "month") -> Period:
    """Parse a month query value, defaulting to the current UTC month."""
    if not month:
        return Period.containing(today_utc())
    return Period.parse(month, field)
