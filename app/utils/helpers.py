"""
Helper utility functions
"""
from bson import ObjectId
from typing import Any, Dict, List, Optional, Union
from datetime import datetime, date
import math
import re
import pytz

from app.config.settings import settings

STUDIO_TZ = pytz.timezone(settings.TIMEZONE)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")

def serialize_doc(doc: Dict) -> Dict:
    """Convert MongoDB document to JSON-serializable format"""
    if doc is None:
        return None

    for key, value in doc.items():
        if isinstance(value, ObjectId):
            doc[key] = str(value)
        elif isinstance(value, datetime):
            doc[key] = to_studio_time(value).isoformat()
        elif isinstance(value, list):
            doc[key] = [serialize_doc(item) if isinstance(item, dict) else item for item in value]
        elif isinstance(value, dict):
            doc[key] = serialize_doc(value)

    return doc

def serialize_docs(docs: List[Dict]) -> List[Dict]:
    """Convert list of MongoDB documents to JSON-serializable format"""
    return [serialize_doc(doc) for doc in docs]

def to_studio_time(value: datetime, tz=STUDIO_TZ) -> datetime:
    """Naive datetimes coming back from Mongo are UTC"""
    if value.tzinfo is None:
        value = pytz.utc.localize(value)
    return value.astimezone(tz)

def parse_int(raw: Any) -> Union[int, float]:
    """
    Integer from the leading digits of a form value ("1500 INR" -> 1500).
    Anything without leading digits becomes NaN instead of being rejected.
    """
    if isinstance(raw, bool):
        return int(raw)
    if isinstance(raw, int):
        return raw
    match = _LEADING_INT.match(str(raw))
    if not match:
        return math.nan
    return int(match.group(1))

def is_nan(value: Any) -> bool:
    return isinstance(value, float) and math.isnan(value)

def parse_datetime(raw: Any) -> Optional[datetime]:
    """ISO date or datetime-local value, None when empty or unparseable"""
    if isinstance(raw, datetime):
        return raw
    text = str(raw or "").strip()
    if not text:
        return None
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError:
        return None

# ─── Display formatting (email templates) ─────────────────────────────────────

def format_datetime(value: Any, tz=STUDIO_TZ, with_time: bool = True) -> str:
    """
    Human-readable studio-local date. Values that are not dates are returned
    as given so nothing the client typed is lost.
    """
    if value is None or value == "":
        return ""
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        return value.strftime("%d %B %Y")
    else:
        parsed = parse_datetime(value)
        if parsed is None:
            return str(value)
        # A bare date (no time part) carries no clock time worth showing
        if "T" not in str(value) and " " not in str(value).strip():
            return parsed.strftime("%d %B %Y")
        # datetime-local inputs are already studio-local wall time
        if parsed.tzinfo is None:
            parsed = tz.localize(parsed)

    localized = to_studio_time(parsed, tz)
    if not with_time:
        return localized.strftime("%d %B %Y")
    return localized.strftime("%d %B %Y, %I:%M %p")

def format_date(value: Any, tz=STUDIO_TZ) -> str:
    return format_datetime(value, tz, with_time=False)

def format_currency(value: Any, symbol: str = "₹") -> str:
    """Currency prefix plus grouped digits; non-numeric text is shown verbatim"""
    if value is None or value == "" or is_nan(value):
        return ""
    amount = parse_int(value)
    if is_nan(amount):
        return str(value)
    return f"{symbol}{amount:,}"

def format_list(values: Optional[List[Any]]) -> str:
    if not values:
        return ""
    return ", ".join(str(v) for v in values)
