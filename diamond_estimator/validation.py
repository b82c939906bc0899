import math
from typing import Dict, Mapping, Optional

from .constants import CARAT_MAX, PROPORTION_RANGE
from .utils import parse_number


def _coerce(value) -> float:
    # Browser number inputs compare an empty field as 0
    n = parse_number(value)
    return 0.0 if n is None else n


def validate_field(field_name: str, value) -> Optional[str]:
    """Advisory check for a single form field; returns an error message or None.

    Only carat, depth and table have rules. The predictor does not enforce any of
    these bounds.
    """
    if field_name not in ("carat", "depth", "table"):
        return None
    label = field_name.capitalize()
    try:
        v = _coerce(value)
    except ValueError:
        return f"{label} must be a number"

    if field_name == "carat":
        if math.isnan(v) or v <= 0:
            return "Carat must be greater than 0"
        if v > CARAT_MAX:
            return f"Carat must be less than or equal to {CARAT_MAX:g}"
        return None

    lo, hi = PROPORTION_RANGE
    if math.isnan(v) or v < lo or v > hi:
        return f"{label} should be between {lo:g}% and {hi:g}%"
    return None


def validate_diamond(values: Mapping[str, object]) -> Dict[str, str]:
    errors = {}
    for name, value in values.items():
        msg = validate_field(name, value)
        if msg:
            errors[name] = msg
    return errors
