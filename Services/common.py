# Services/common.py
from datetime import datetime, timezone
from decimal import Decimal
from typing import Annotated, Optional
from pydantic import AfterValidator, AnyUrl, BeforeValidator, TypeAdapter, ValidationError

# Upper bound of a serial primary key
MAX_ID = 2**31 - 1

_url_adapter = TypeAdapter(AnyUrl)

def validate_url(value: str) -> str:
    """Reject anything that is not an absolute URL, but keep the caller's string as-is."""
    try:
        _url_adapter.validate_python(value)
    except ValidationError:
        raise ValueError("Invalid url")
    return value

def to_naive_utc(value: datetime) -> datetime:
    """Columns are timezone-less and hold UTC; aware inputs are converted, naive ones kept."""
    if value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)

def to_decimal(value: Optional[float]) -> Optional[Decimal]:
    """Parse a request number into an exact decimal for NUMERIC columns."""
    if value is None:
        return None
    return Decimal(str(value))

def to_number(value):
    """Convert a NUMERIC column value back into a plain number. None stays None."""
    if isinstance(value, Decimal):
        return float(value)
    return value

# Absolute URL kept as the submitted string
UrlStr = Annotated[str, AfterValidator(validate_url)]

# Timestamp stored as naive UTC
UtcDatetime = Annotated[datetime, AfterValidator(to_naive_utc)]

# Decimal column exposed as a JSON number
Number = Annotated[float, BeforeValidator(to_number)]
