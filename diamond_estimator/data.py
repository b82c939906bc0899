from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Mapping, Optional

import pandas as pd

from .constants import CUT_GRADES, COLOR_GRADES, CLARITY_GRADES


# ----------------- Regression coefficients -----------------
@dataclass(frozen=True)
class CoefficientTable:
    intercept: float
    carat: float
    depth: float
    table: float
    x: float
    y: float
    z: float
    cut: Mapping[str, float]
    color: Mapping[str, float]
    clarity: Mapping[str, float]

    def continuous_weight(self, name: str) -> Optional[float]:
        if name in ("carat", "depth", "table", "x", "y", "z"):
            return getattr(self, name)
        return None

    def category_offset(self, name: str, level: Optional[str]) -> Optional[float]:
        # None when the level is unknown; baselines are real 0.0 entries
        if name not in ("cut", "color", "clarity") or level is None:
            return None
        return getattr(self, name).get(level)


def _frozen(levels: Dict[str, float]) -> Mapping[str, float]:
    return MappingProxyType(dict(levels))


# Multiple linear regression on the classic ~54k-stone diamonds dataset.
# Baselines (offset 0): Fair cut, J color, I1 clarity.
COEFFICIENTS = CoefficientTable(
    intercept=-8444.03,
    carat=7756.43,
    depth=115.82,
    table=-92.97,
    x=817.13,
    y=60.63,
    z=-341.99,
    cut=_frozen({
        "Fair": 0.0,
        "Good": 307.97,
        "Very Good": 678.23,
        "Premium": 726.16,
        "Ideal": 1164.62,
    }),
    color=_frozen({
        "J": 0.0,
        "I": 486.89,
        "H": 676.55,
        "G": 1167.05,
        "F": 1401.23,
        "E": 1541.78,
        "D": 1835.42,
    }),
    clarity=_frozen({
        "I1": 0.0,
        "SI2": 1883.51,
        "SI1": 2724.96,
        "VS2": 3539.00,
        "VS1": 3936.20,
        "VVS2": 4275.00,
        "VVS1": 4517.45,
        "IF": 4918.87,
    }),
)

BASELINE_LEVELS: Dict[str, str] = {"cut": "Fair", "color": "J", "clarity": "I1"}


def coefficient_frame(table: CoefficientTable = COEFFICIENTS) -> pd.DataFrame:
    """Flatten the coefficient table into rows of (term, level, weight) for display."""
    rows = [{"Term": "intercept", "Level": "", "Weight": float(table.intercept)}]
    for name in ("carat", "depth", "table", "x", "y", "z"):
        rows.append({"Term": name, "Level": "per unit", "Weight": float(getattr(table, name))})
    for name, order in (("cut", CUT_GRADES), ("color", COLOR_GRADES), ("clarity", CLARITY_GRADES)):
        levels = getattr(table, name)
        for level in order:
            note = f"{level} (baseline)" if BASELINE_LEVELS[name] == level else level
            rows.append({"Term": name, "Level": note, "Weight": float(levels[level])})
    return pd.DataFrame(rows, columns=["Term", "Level", "Weight"])
