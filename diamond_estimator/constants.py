from typing import Dict, List, Tuple

# Grading scales, best grade last for cut and first for color/clarity (as shown in the form)
CUT_GRADES: List[str] = ["Fair", "Good", "Very Good", "Premium", "Ideal"]
COLOR_GRADES: List[str] = ["D", "E", "F", "G", "H", "I", "J"]
CLARITY_GRADES: List[str] = ["IF", "VVS1", "VVS2", "VS1", "VS2", "SI1", "SI2", "I1"]

DIAMOND_OPTIONS: Dict[str, List[str]] = {
    "cut": CUT_GRADES,
    "color": COLOR_GRADES,
    "clarity": CLARITY_GRADES,
}

NUMERIC_FIELDS: Tuple[str, ...] = ("carat", "depth", "table")
CATEGORICAL_FIELDS: Tuple[str, ...] = ("cut", "color", "clarity")

# Form bounds
CARAT_MAX = 10.0
CARAT_INPUT_MIN = 0.1
CARAT_STEP = 0.01
PROPORTION_RANGE: Tuple[float, float] = (50.0, 70.0)
PROPORTION_STEP = 0.1

# ± band around the point estimate (heuristic, not a regression interval)
CONFIDENCE_FRACTION = 0.15

# Initial form state
DEFAULT_DIAMOND: Dict[str, object] = {
    "carat": 1.0,
    "cut": "Ideal",
    "color": "D",
    "clarity": "IF",
    "depth": 61.5,
    "table": 56.0,
}

FIELD_LABELS: Dict[str, str] = {
    "carat": "Carat Weight",
    "cut": "Cut Quality",
    "color": "Color Grade",
    "clarity": "Clarity Grade",
    "depth": "Depth Percentage",
    "table": "Table Percentage",
}

# Factor impact bars
FACTOR_COLORS: Dict[str, str] = {
    "carat": "#3f51b5",
    "cut": "#4caf50",
    "color": "#ff9800",
    "clarity": "#e91e63",
}
DEFAULT_FACTOR_COLOR = "#757575"

# Carat sensitivity chart grid
CARAT_CURVE_POINTS = 40
