"""Works API client - literature volume lookups."""

from loguru import logger

from openalex_client.base import BaseClient
from openalex_client.works.schemas import WorksResponse


def topic_query(topic: str, country: str) -> str:
    """Search text for works on a topic mentioning a country."""
    return f'{topic.strip()} "{country.strip()}"'


def country_query(country: str) -> str:
    """Search text for all works mentioning a country."""
    return f'"{country.strip()}"'


class WorksClient(BaseClient):
    """Client for OpenAlex works search."""

    async def count(self, query: str) -> int:
        """GET /works?filter=default.search:{query} - number of matching works."""
        data = await self._get(
            "works",
            params=self._params(filter=f"default.search:{query}", per_page=1),
        )
        count = WorksResponse.model_validate(data).total
        logger.debug("{!r}: {} works", query, count)
        return count
