import logging
import math
from dataclasses import dataclass, asdict
from typing import Dict, Iterable, List, Mapping, Optional

import numpy as np
import pandas as pd

from .constants import CONFIDENCE_FRACTION, CARAT_CURVE_POINTS, CARAT_MAX, CARAT_INPUT_MIN
from .data import COEFFICIENTS, CoefficientTable
from .utils import round_half_up, parse_number

logger = logging.getLogger(__name__)


# ----------------- Structures -----------------
@dataclass(frozen=True)
class DiamondDescription:
    carat: Optional[float] = None
    cut: Optional[str] = None
    color: Optional[str] = None
    clarity: Optional[str] = None
    depth: Optional[float] = None
    table: Optional[float] = None

    @classmethod
    def from_mapping(cls, values: Mapping[str, object]) -> "DiamondDescription":
        """Build a snapshot from raw form or CLI values.

        Numeric fields are parsed as numbers (empty means absent); text that is
        not a number raises ValueError. Categorical labels are passed through.
        """
        def label(name):
            v = values.get(name)
            return None if v is None or str(v) == "" else str(v)
        return cls(
            carat=parse_number(values.get("carat")),
            cut=label("cut"),
            color=label("color"),
            clarity=label("clarity"),
            depth=parse_number(values.get("depth")),
            table=parse_number(values.get("table")),
        )

    def replace_carat(self, carat: float) -> "DiamondDescription":
        return DiamondDescription(carat, self.cut, self.color, self.clarity, self.depth, self.table)

    def to_dict(self) -> Dict[str, object]:
        return asdict(self)


@dataclass(frozen=True)
class PricePrediction:
    prediction: int
    lower_bound: int
    upper_bound: int

    def to_dict(self) -> Dict[str, int]:
        return asdict(self)


@dataclass(frozen=True)
class TermContribution:
    term: str
    value: object
    contribution: float


DEGENERATE = PricePrediction(prediction=0, lower_bound=0, upper_bound=0)


# ----------------- Core formula -----------------
def _is_set(value) -> bool:
    # None, 0 and NaN all count as "not supplied"
    if value is None:
        return False
    if isinstance(value, float) and math.isnan(value):
        return False
    return bool(value)


def _has_valid_carat(diamond: DiamondDescription) -> bool:
    return _is_set(diamond.carat) and diamond.carat > 0


def _linear_terms(diamond: DiamondDescription, table: CoefficientTable) -> List[TermContribution]:
    terms = [
        TermContribution("intercept", None, table.intercept),
        TermContribution("carat", diamond.carat, diamond.carat * table.carat),
    ]
    for name in ("depth", "table"):
        value = getattr(diamond, name)
        if _is_set(value):
            terms.append(TermContribution(name, value, value * table.continuous_weight(name)))
    for name in ("cut", "color", "clarity"):
        level = getattr(diamond, name)
        offset = table.category_offset(name, level) if level else None
        if offset:
            terms.append(TermContribution(name, level, offset))
    return terms


def predict_price(diamond: DiamondDescription, table: CoefficientTable = COEFFICIENTS) -> PricePrediction:
    if not _has_valid_carat(diamond):
        logger.debug("Degenerate estimate for carat=%r", diamond.carat)
        return DEGENERATE

    price = 0.0
    for term in _linear_terms(diamond, table):
        price += term.contribution
    if not math.isfinite(price):
        # Overflowing or infinite inputs; there is no integer price to report
        logger.warning("Non-finite raw price %r for %s", price, diamond)
        return DEGENERATE
    confidence = CONFIDENCE_FRACTION * price

    result = PricePrediction(
        prediction=max(0, round_half_up(price)),
        lower_bound=max(0, round_half_up(price - confidence)),
        upper_bound=max(0, round_half_up(price + confidence)),
    )
    logger.debug("Estimate for %s: raw=%.2f -> %s", diamond, price, result)
    return result


def price_breakdown(diamond: DiamondDescription, table: CoefficientTable = COEFFICIENTS) -> List[TermContribution]:
    """Per-term contributions summed by predict_price; empty for a degenerate carat.

    Terms that are skipped by the formula (falsy depth/table, baseline or unknown
    categories) are left out.
    """
    if not _has_valid_carat(diamond):
        return []
    return _linear_terms(diamond, table)


def breakdown_frame(diamond: DiamondDescription, table: CoefficientTable = COEFFICIENTS) -> pd.DataFrame:
    rows = [{"Term": t.term, "Input": "" if t.value is None else str(t.value),
             "Contribution (USD)": float(t.contribution)}
            for t in price_breakdown(diamond, table)]
    return pd.DataFrame(rows, columns=["Term", "Input", "Contribution (USD)"])


# ----------------- Sensitivity -----------------
def carat_grid(lo: float = CARAT_INPUT_MIN, hi: float = CARAT_MAX, n: int = CARAT_CURVE_POINTS) -> np.ndarray:
    return np.round(np.linspace(lo, hi, n), 2)


def carat_price_curve(diamond: DiamondDescription, carats: Optional[Iterable[float]] = None,
                      table: CoefficientTable = COEFFICIENTS) -> pd.DataFrame:
    """Predictions over a carat grid with every other field held fixed."""
    grid = carat_grid() if carats is None else np.asarray(list(carats), dtype=float)
    rows = []
    for ct in grid:
        p = predict_price(diamond.replace_carat(float(ct)), table)
        rows.append({"carat": float(ct), "prediction": p.prediction,
                     "lower_bound": p.lower_bound, "upper_bound": p.upper_bound})
    return pd.DataFrame(rows, columns=["carat", "prediction", "lower_bound", "upper_bound"])
