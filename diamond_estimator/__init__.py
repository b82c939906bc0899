from .pricing import DiamondDescription, PricePrediction, predict_price, price_breakdown
from .validation import validate_field, validate_diamond

__all__ = [
    "DiamondDescription", "PricePrediction", "predict_price", "price_breakdown",
    "validate_field", "validate_diamond",
]
