"""Fitted regression constants - fixed at import, never re-estimated.

All models share the feature row [1, log10(topic volume), is_small, log10(country volume)].
Fit by OLS on 1,435 LLM-generated references verified with SVRIS.
"""

from dataclasses import dataclass
from enum import StrEnum
from types import MappingProxyType

SAMPLE_SIZE = 1435
R_SQUARED = 0.302

# Two-sided 95% normal quantile
Z_95 = 1.96


@dataclass(frozen=True)
class LinearModel:
    """Coefficients of one linear model over the shared feature row."""

    intercept: float
    log_topic: float
    is_small: float
    log_country: float

    def coefficients(self) -> tuple[float, float, float, float]:
        return (self.intercept, self.log_topic, self.is_small, self.log_country)


class RiskLevel(StrEnum):
    """Ordinal risk label for a predicted error rate."""

    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"
    VERY_HIGH = "Very High"
    SEVERE = "Severe"


# Overall error rate (R² = 0.302, all p < 0.001)
OVERALL_MODEL = LinearModel(intercept=1.565, log_topic=-0.122, is_small=0.468, log_country=-0.123)

# (XᵀX)⁻¹ and residual MSE of the overall fit, for the mean-prediction interval
MSE = 0.17500454853047462
INV_GRAM = (
    (0.1241653961269146, -0.0004086947610075407, -0.0013720023406530145, -0.01974929210738879),
    (-0.00040869476100748264, 0.0008501341725356133, 3.4169994771720727e-07, -0.0005459884720810814),
    (-0.0013720023406530151, 3.4169994771749537e-07, 0.0027874927965916914, -3.003079533087211e-06),
    (-0.019749292107388836, -0.000545988472081072, -3.003079533087108e-06, 0.003617671144858614),
)

# Per-category likelihoods, fit independently on the same features
CATEGORIES = ("verified", "verified_with_error", "needs_review", "unverified")
CATEGORY_MODELS = MappingProxyType(
    {
        "verified": LinearModel(intercept=-0.8376, log_topic=0.1055, is_small=-0.3369, log_country=0.1337),
        "verified_with_error": LinearModel(intercept=0.2751, log_topic=0.0162, is_small=-0.1393, log_country=-0.0119),
        "needs_review": LinearModel(intercept=0.3796, log_topic=-0.0106, is_small=0.0237, log_country=-0.0242),
        "unverified": LinearModel(intercept=1.1854, log_topic=-0.1109, is_small=0.4441, log_country=-0.0984),
    }
)

# Lower bound of each level, highest first
RISK_THRESHOLDS = (
    (0.70, RiskLevel.SEVERE),
    (0.50, RiskLevel.VERY_HIGH),
    (0.30, RiskLevel.HIGH),
    (0.15, RiskLevel.MODERATE),
)

ADVISORIES = MappingProxyType(
    {
        RiskLevel.LOW: "Likely reliable — verify selectively",
        RiskLevel.MODERATE: "Some errors expected — verify key references",
        RiskLevel.HIGH: "Significant error risk — verify all references",
        RiskLevel.VERY_HIGH: "Majority of references may contain errors",
        RiskLevel.SEVERE: "Most references likely unreliable — do not use without verification",
    }
)
