#!/usr/bin/env python3
"""
Predict AI reference error rates for a research topic and country.

Usage:
    python predict.py "malaria prevention" Nigeria    # Look up OpenAlex counts and predict
    python predict.py --counts 1000 1000000           # Predict from known counts
    python predict.py --examples                      # Run the example queries
    python predict.py --info                          # Show model coefficients
"""

import sys
from pathlib import Path

# Add project to path
sys.path.insert(0, str(Path(__file__).parent))

from settings import EXAMPLE_QUERIES, LOG_LEVEL, LOG_TO_FILE
from settings.logging import setup_logging
from web.api import prediction
from web.api.errors import DataSourceUnavailableError, ValidationError
from web.api.prediction.schemas import ModelPrediction, PredictionResponse

logger = setup_logging(level=LOG_LEVEL, to_file=LOG_TO_FILE)


def print_model(label: str, result: ModelPrediction) -> None:
    print(f"\n{label}")
    print(f"  Predicted error rate: {result.rate_label} ({result.margin_label})")
    print(f"  Risk: {result.risk_level} - {result.advisory}")
    c = result.categories
    print(
        f"  Verified {c.verified:.0f}% | Verified w/ error {c.verified_with_error:.0f}% | "
        f"Needs review {c.needs_review:.0f}% | Unverified {c.unverified:.0f}%"
    )


def print_report(resp: PredictionResponse) -> None:
    print("\n" + "=" * 60)
    if resp.topic:
        print(f"{resp.topic} + {resp.country}")
    print(
        f"OpenAlex: {resp.topic_volume_label} topic+country works · "
        f"{resp.country_volume_label} country works"
    )
    print("=" * 60)
    print_model("Flagship model (e.g. GPT-5, Claude Opus, Gemini Pro)", resp.flagship)
    print_model("Small model (e.g. GPT-5-nano, Haiku, Llama 3 8B)", resp.small)
    print()


def print_info() -> None:
    info = prediction.get_model_info()
    print(f"\nBased on {info.sample_size:,} verified citations · R² = {info.r_squared}")
    rows = {"overall": info.overall, **info.categories}
    print(f"\n{'model':<22}{'intercept':>10}{'log topic':>11}{'small':>9}{'log country':>13}")
    for name, c in rows.items():
        print(f"{name:<22}{c.intercept:>10.4f}{c.log_topic:>11.4f}{c.is_small:>9.4f}{c.log_country:>13.4f}")
    print()


def run_query(topic: str, country: str) -> bool:
    try:
        print_report(prediction.get_prediction(topic, country))
    except ValidationError as e:
        print(f"\n⚠️  {e.message}\n")
        return False
    except DataSourceUnavailableError as e:
        print(f"\n❌ {e.message}\n")
        return False
    return True


def main():
    args = sys.argv[1:]

    if "--info" in args:
        print_info()
        return

    if "--examples" in args:
        ok = True
        for topic, country, hint in EXAMPLE_QUERIES:
            logger.info("Example: {} + {} (expected {})", topic, country, hint)
            ok = run_query(topic, country) and ok
        sys.exit(0 if ok else 1)

    if "--counts" in args:
        values = [a for a in args if a != "--counts"]
        if len(values) != 2 or not all(v.isdigit() for v in values):
            print(__doc__)
            sys.exit(1)
        print_report(prediction.get_prediction_from_counts(int(values[0]), int(values[1])))
        return

    if len(args) != 2:
        print(__doc__)
        sys.exit(1)

    sys.exit(0 if run_query(args[0], args[1]) else 1)


if __name__ == "__main__":
    main()
