import math
from typing import Optional


def round_half_up(x: float) -> int:
    # Halves round toward +inf, so 2.5 -> 3 and -2.5 -> -2
    return int(math.floor(float(x) + 0.5))


def is_number(x) -> bool:
    return isinstance(x, (int, float)) and not isinstance(x, bool)


def parse_number(raw) -> Optional[float]:
    """Turn a raw form value into a float; empty input means "not supplied"."""
    if raw is None:
        return None
    if is_number(raw):
        return float(raw)
    text = str(raw).strip().replace(",", "")
    if not text:
        return None
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"not a number: {raw!r}") from None


def fmt_usd(x, decimals: int = 0, symbol: str = "$") -> str:
    try:
        return f"{symbol}{float(x):,.{decimals}f}"
    except (TypeError, ValueError):
        return str(x)


def fmt_percent(x) -> str:
    if x is None:
        return "-"
    return f"{float(x):g}%"
