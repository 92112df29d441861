"""Works API client - literature volume lookups."""

from openalex_client.works.client import WorksClient, country_query, topic_query
from openalex_client.works.schemas import WorksMeta, WorksResponse

__all__ = [
    "WorksClient",
    "topic_query",
    "country_query",
    "WorksMeta",
    "WorksResponse",
]
