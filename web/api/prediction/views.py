"""Prediction API views - thin layer over services."""

import asyncio

import httpx
from loguru import logger

from app.container import container
from app.models.prediction.entities import PredictionResult
from settings import CEILING_PCT
from src import formulas
from src.model import CATEGORY_MODELS, OVERALL_MODEL, R_SQUARED, SAMPLE_SIZE, LinearModel
from web.api.errors import DataSourceUnavailableError, validate_query

from .schemas import CategoryItem, CoefficientsItem, ModelInfoResponse, ModelPrediction, PredictionResponse


def _model_prediction(result: PredictionResult) -> ModelPrediction:
    """Attach display fields. Rates above the ceiling are shown as a ceiling effect, not a number."""
    rate_pct = round(result.rate * 100)
    margin_pp = round(result.margin * 100)
    capped = rate_pct > CEILING_PCT

    return ModelPrediction(
        rate=result.rate,
        margin=result.margin,
        rate_pct=rate_pct,
        margin_pp=margin_pp,
        ceiling_effect=capped,
        rate_label=f">{CEILING_PCT}%" if capped else f"{rate_pct}%",
        margin_label="ceiling effect" if capped else f"±{margin_pp} pp",
        categories=CategoryItem(**result.categories.to_dict()),
        risk_level=str(result.risk_level),
        advisory=result.advisory,
    )


def _response(
    topic: str | None,
    country: str | None,
    topic_volume: int,
    country_volume: int,
    flagship: PredictionResult,
    small: PredictionResult,
) -> PredictionResponse:
    return PredictionResponse(
        topic=topic,
        country=country,
        topic_volume=topic_volume,
        country_volume=country_volume,
        topic_volume_label=formulas.format_count(topic_volume),
        country_volume_label=formulas.format_count(country_volume),
        flagship=_model_prediction(flagship),
        small=_model_prediction(small),
    )


def get_prediction(topic: str, country: str) -> PredictionResponse:
    """Predict error rates for a topic and country via OpenAlex counts."""
    validate_query(topic, country)
    container.init()

    try:
        data = asyncio.run(container.prediction.check(topic, country))
    except (httpx.HTTPError, ValueError) as e:  # ValueError: bad JSON or schema mismatch
        logger.warning("OpenAlex lookup failed: {}", e)
        raise DataSourceUnavailableError() from e

    return _response(
        data.topic,
        data.country,
        data.topic_volume,
        data.country_volume,
        data.flagship,
        data.small,
    )


def get_prediction_from_counts(topic_volume: int, country_volume: int) -> PredictionResponse:
    """Predict error rates for known literature counts."""
    container.init()
    data = container.prediction.compare(topic_volume, country_volume)

    return _response(None, None, topic_volume, country_volume, data.flagship, data.small)


def get_model_info() -> ModelInfoResponse:
    """Get regression model metadata."""

    def coefs(model: LinearModel) -> CoefficientsItem:
        return CoefficientsItem(
            intercept=model.intercept,
            log_topic=model.log_topic,
            is_small=model.is_small,
            log_country=model.log_country,
        )

    return ModelInfoResponse(
        sample_size=SAMPLE_SIZE,
        r_squared=R_SQUARED,
        overall=coefs(OVERALL_MODEL),
        categories={name: coefs(m) for name, m in CATEGORY_MODELS.items()},
    )
