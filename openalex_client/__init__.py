"""OpenAlex API client package."""

from openalex_client.base import BaseClient, set_api_config
from openalex_client.works import WorksClient, country_query, topic_query

__all__ = [
    # Base
    "BaseClient",
    "set_api_config",
    # Clients
    "WorksClient",
    # Queries
    "topic_query",
    "country_query",
]
