"""Research Reality Check - citation error-rate prediction engine."""

from src import formulas, model
from src.formulas import classify, decompose, margin, predict
from src.model import RiskLevel

__all__ = [
    "predict",
    "decompose",
    "margin",
    "classify",
    "RiskLevel",
    "formulas",
    "model",
]
