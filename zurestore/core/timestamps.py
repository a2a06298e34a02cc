"""RFC 1123 timestamp helpers for service dates (Last-Modified, LastSyncTime)."""

from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from ..exceptions import TimestampParseError


def parse_rfc1123(value: str) -> datetime:
    """
    Parse an RFC 1123 date such as ``Wed, 19 Jan 2022 22:28:43 GMT``.

    Day and month names are matched as English tokens whatever the process
    locale is.

    Returns:
        Timezone-aware UTC datetime

    Raises:
        TimestampParseError: If the value is not an RFC 1123 date
    """
    try:
        parsed = parsedate_to_datetime(value.strip())
    except (AttributeError, TypeError, ValueError) as e:
        raise TimestampParseError(value) from e
    if parsed.tzinfo is None:
        # "-0000" means UTC with no known local offset
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
