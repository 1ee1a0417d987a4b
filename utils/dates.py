from datetime import date

from dateutil import parser


def short_day(value) -> str:
    """
    Compact day label for charts and lists.
    Example:
      "2024-01-15" -> "Jan 15"
    """
    if isinstance(value, date):
        d = value
    else:
        d = parser.isoparse(str(value)).date()
    return f"{d.strftime('%b')} {d.day}"
