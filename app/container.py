"""Dependency Injection container - initialized at app startup."""

from app.services.prediction.service import PredictionService
from openalex_client import WorksClient, set_api_config
from settings import API_BASE_URL, API_EMAIL, API_TIMEOUT, MAX_CONCURRENT


class Container:
    """Application DI container - holds all singleton instances."""

    _instance = None
    _initialized = False

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def init(self) -> None:
        """Initialize all dependencies. Call once at app startup."""
        if self._initialized:
            return

        set_api_config(API_BASE_URL, API_TIMEOUT, API_EMAIL)

        self.prediction = PredictionService(
            client_factory=lambda: WorksClient(max_concurrent=MAX_CONCURRENT),
        )

        self._initialized = True


# Global container instance
container = Container()
