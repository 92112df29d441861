"""Prediction service - literature lookups feeding the regression engine."""

import asyncio
from collections.abc import Callable

from loguru import logger

from app.models.prediction.entities import CategoryBreakdown, ModelComparison, PredictionResult, QueryPrediction
from openalex_client import WorksClient, country_query, topic_query
from src import formulas


class PredictionService:
    """Error-rate predictions for research topics."""

    def __init__(self, client_factory: Callable[[], WorksClient] = WorksClient):
        self._client_factory = client_factory
        logger.debug("PredictionService initialized")

    def evaluate(self, topic_volume: int, country_volume: int, is_small_model: bool) -> PredictionResult:
        """Run the engine on one input triple."""
        rate = formulas.predict(topic_volume, country_volume, is_small_model)
        level = formulas.classify(rate)

        return PredictionResult(
            rate=rate,
            margin=formulas.margin(topic_volume, country_volume, is_small_model),
            categories=CategoryBreakdown(**formulas.decompose(topic_volume, country_volume, is_small_model)),
            risk_level=level,
            advisory=formulas.advisory(level),
        )

    def compare(self, topic_volume: int, country_volume: int) -> ModelComparison:
        """Flagship vs small model for the same volumes."""
        return ModelComparison(
            flagship=self.evaluate(topic_volume, country_volume, is_small_model=False),
            small=self.evaluate(topic_volume, country_volume, is_small_model=True),
        )

    async def fetch_volumes(self, topic: str, country: str) -> tuple[int, int]:
        """Topic+country and country-only work counts. Both lookups run concurrently."""
        async with self._client_factory() as client:
            try:
                async with asyncio.TaskGroup() as tg:
                    topic_task = tg.create_task(client.count(topic_query(topic, country)))
                    country_task = tg.create_task(client.count(country_query(country)))
            except ExceptionGroup as eg:
                # sibling is already cancelled; surface the first lookup error
                raise eg.exceptions[0] from eg

        topic_volume, country_volume = topic_task.result(), country_task.result()

        logger.info(
            "{} / {}: {} topic works, {} country works",
            topic,
            country,
            formulas.format_count(topic_volume),
            formulas.format_count(country_volume),
        )
        return topic_volume, country_volume

    async def check(self, topic: str, country: str) -> QueryPrediction:
        """Look up volumes, then predict for both model sizes."""
        topic_volume, country_volume = await self.fetch_volumes(topic, country)
        result = self.compare(topic_volume, country_volume)

        return QueryPrediction(
            topic=topic.strip(),
            country=country.strip(),
            topic_volume=topic_volume,
            country_volume=country_volume,
            flagship=result.flagship,
            small=result.small,
        )
