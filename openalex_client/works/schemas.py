"""Works API schemas - only the result count is consumed."""

from pydantic import BaseModel


class WorksMeta(BaseModel):
    """Listing metadata."""

    count: int | None = None
    per_page: int | None = None
    db_response_time_ms: int | None = None


class WorksResponse(BaseModel):
    """GET /works listing. Results are ignored."""

    meta: WorksMeta | None = None

    @property
    def total(self) -> int:
        """Matching works; absent or null counts read as 0."""
        if self.meta is None or self.meta.count is None:
            return 0
        return self.meta.count
