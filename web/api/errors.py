"""API errors and validation helpers."""


class ValidationError(Exception):
    """Validation error."""

    def __init__(self, message: str = "Validation error"):
        self.message = message
        super().__init__(self.message)


class DataSourceUnavailableError(Exception):
    """Literature counts could not be fetched."""

    def __init__(self, message: str = "Could not reach OpenAlex. Please try again."):
        self.message = message
        super().__init__(self.message)


def validate_query(topic: str, country: str) -> None:
    """Validate topic and country are non-blank."""
    if not topic or not topic.strip():
        raise ValidationError("Topic must not be empty")
    if not country or not country.strip():
        raise ValidationError("Country must not be empty")
