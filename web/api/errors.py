"""API errors and validation helpers."""


class NotFoundError(Exception):
    """Resource not found."""

    def __init__(self, message: str = "Resource not found"):
        self.message = message
        super().__init__(self.message)


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


# Trend window (days)
MIN_DAYS = 1
MAX_DAYS = 90

MAX_COUNTY_LEN = 64


def validate_days(days: int) -> None:
    """Validate trend window is in valid range."""
    if not MIN_DAYS <= days <= MAX_DAYS:
        raise ValidationError(f"Invalid days: {days}. Must be between {MIN_DAYS} and {MAX_DAYS}")


def validate_county(county: str | None) -> str:
    """Strip and validate a county path/query value."""
    county = (county or "").strip()
    if not county:
        raise ValidationError("County required")
    if len(county) > MAX_COUNTY_LEN:
        raise ValidationError(f"Invalid county: longer than {MAX_COUNTY_LEN} characters")
    return county
