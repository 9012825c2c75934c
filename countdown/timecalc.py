from datetime import datetime, timedelta
from typing import Dict, Optional

SECONDS_IN_MINUTE = 60
SECONDS_IN_HOUR = 60 * SECONDS_IN_MINUTE

_CLOCK_FORMATS = ("%I:%M %p", "%I:%M%p", "%H:%M")
_UNIT_SECONDS: Dict[str, int] = {"h": SECONDS_IN_HOUR, "m": SECONDS_IN_MINUTE, "s": 1}


class ParseError(ValueError):
    pass


def format_clock(seconds: int) -> str:
    total = max(0, int(seconds))
    hours = total // SECONDS_IN_HOUR
    minutes = (total % SECONDS_IN_HOUR) // SECONDS_IN_MINUTE
    secs = total % SECONDS_IN_MINUTE
    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def parse_clock_time(text: str, now: Optional[datetime] = None) -> int:
    if now is None:
        now = datetime.now()
    raw = text.strip()
    for fmt in _CLOCK_FORMATS:
        try:
            parsed = datetime.strptime(raw, fmt)
        except ValueError:
            continue
        break
    else:
        raise ParseError(f"not a clock time: {text!r}")

    target = now.replace(hour=parsed.hour, minute=parsed.minute, second=0, microsecond=0)
    if target < now:
        # already passed today, so tomorrow
        target += timedelta(days=1)
    return int((target - now).total_seconds())


def parse_duration(text: str) -> int:
    raw = text.strip()
    if not raw:
        raise ParseError("empty duration")

    total = 0
    digits = ""
    for ch in raw:
        if ch.isascii() and ch.isdigit():
            digits += ch
        elif ch in _UNIT_SECONDS:
            if not digits:
                raise ParseError(f"missing number before {ch!r} in {text!r}")
            total += int(digits) * _UNIT_SECONDS[ch]
            digits = ""
        else:
            raise ParseError(f"unexpected {ch!r} in duration {text!r}")

    # trailing bare digits are seconds
    if digits:
        total += int(digits)
    return total


def parse_target(text: str, now: Optional[datetime] = None) -> int:
    try:
        return parse_clock_time(text, now)
    except ParseError:
        pass
    try:
        return parse_duration(text)
    except ParseError:
        raise ParseError(f"invalid duration or time: {text!r}") from None
