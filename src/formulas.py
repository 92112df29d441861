"""Pure math formulas - no dependencies, easily testable."""
from collections.abc import Mapping
from math import log10, sqrt

from src.model import (
    ADVISORIES,
    CATEGORY_MODELS,
    INV_GRAM,
    MSE,
    OVERALL_MODEL,
    RISK_THRESHOLDS,
    Z_95,
    LinearModel,
    RiskLevel,
)


def features(topic_volume: int, country_volume: int, is_small_model: bool) -> tuple[float, float, float, float]:
    """Feature row [1, log10 topic, small flag, log10 country]. Volumes below 1 count as 1."""
    return (
        1.0,
        log10(max(topic_volume, 1)),
        1.0 if is_small_model else 0.0,
        log10(max(country_volume, 1)),
    )


def linear(model: LinearModel, x: tuple[float, ...]) -> float:
    """Unbounded linear score of a feature row."""
    return sum(c * v for c, v in zip(model.coefficients(), x))


def predict(
    topic_volume: int,
    country_volume: int,
    is_small_model: bool,
    model: LinearModel = OVERALL_MODEL,
) -> float:
    """Overall error rate, clamped to [0, 1]."""
    raw = linear(model, features(topic_volume, country_volume, is_small_model))
    return max(0.0, min(1.0, raw))


def decompose(
    topic_volume: int,
    country_volume: int,
    is_small_model: bool,
    models: Mapping[str, LinearModel] = CATEGORY_MODELS,
) -> dict[str, float]:
    """Category shares in percent. Each raw score is floored at 0, then all are scaled to sum 100."""
    x = features(topic_volume, country_volume, is_small_model)
    raw = {name: max(0.0, linear(m, x)) for name, m in models.items()}

    total = sum(raw.values())
    if not total:
        return {name: 0.0 for name in raw}

    return {name: 100 * v / total for name, v in raw.items()}


def margin(
    topic_volume: int,
    country_volume: int,
    is_small_model: bool,
    inv_gram: tuple[tuple[float, ...], ...] = INV_GRAM,
    mse: float = MSE,
) -> float:
    """Half-width of the 95% confidence interval on the mean rate."""
    x = features(topic_volume, country_volume, is_small_model)
    n = len(x)

    quad = 0.0
    for i in range(n):
        for j in range(n):
            quad += x[i] * inv_gram[i][j] * x[j]

    return Z_95 * sqrt(mse * max(quad, 0.0))


def classify(rate: float) -> RiskLevel:
    """Risk level for a rate: <0.15 Low, <0.30 Moderate, <0.50 High, <0.70 Very High, else Severe."""
    for lower, level in RISK_THRESHOLDS:
        if rate >= lower:
            return level
    return RiskLevel.LOW


def advisory(level: RiskLevel) -> str:
    return ADVISORIES[level]


def format_count(n: int) -> str:
    """Compact volume: 1.2M, 3.4K or the plain number."""
    if n >= 1_000_000:
        return f"{n / 1_000_000:.1f}M"
    if n >= 1_000:
        return f"{n / 1_000:.1f}K"
    return str(n)
