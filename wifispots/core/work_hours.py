import re

from .errors import ValidationError

ROUND_THE_CLOCK = "Round the clock"

_ROUND_THE_CLOCK_RE = re.compile(r"^round the clock$", re.IGNORECASE)
_RANGE_RE = re.compile(r"^(\d{2}):(\d{2})-(\d{2}):(\d{2})$")


def validate_work_hours(text: str | None) -> bool:
    if not text or not text.strip():
        return False
    text = text.strip()

    if _ROUND_THE_CLOCK_RE.match(text):
        return True

    m = _RANGE_RE.match(text)
    if not m:
        return False
    h1, m1, h2, m2 = (int(g) for g in m.groups())
    return 0 <= h1 <= 23 and 0 <= h2 <= 23 and 0 <= m1 <= 59 and 0 <= m2 <= 59


def normalize_work_hours(text: str | None) -> str:
    """Return the value to persist, or raise ValidationError for a bad format."""
    if not validate_work_hours(text):
        raise ValidationError(
            f"Invalid work hours format. Use HH:MM-HH:MM or '{ROUND_THE_CLOCK}'."
        )
    text = text.strip()
    if _ROUND_THE_CLOCK_RE.match(text):
        return ROUND_THE_CLOCK
    return text
