from datetime import date
from zoneinfo import ZoneInfo

IST_TZ = ZoneInfo("Asia/Kolkata")

WALK_IN_CUSTOMER = "Walk-in Customer"
UNKNOWN_SUPPLIER = "Unknown Supplier"

UNIT_TYPES = ("pcs", "kg", "g", "l", "ml", "box", "pack", "dozen")

DISPLAY_DATE_FORMAT = "%d %b %Y"


def format_date(value: date | None) -> str:
    if value is None:
        return ""
    return value.strftime(DISPLAY_DATE_FORMAT)
