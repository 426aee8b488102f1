"""Content record models seen by the repair handlers."""

from pydantic import BaseModel, ConfigDict, Field


class PostDraft(BaseModel):
    """Sanitized record data about to be written (pre-save hook)."""

    id: int | None = Field(default=None, description="Record ID, absent for new records")
    type: str = Field(default="", description="Content type tag")
    title: str = Field(default="", description="Record title")
    slug: str = Field(default="", description="URL slug")
    status: str = Field(default="draft", description="Publication status")
    parent_id: int = Field(default=0, ge=0, description="Parent record ID, 0 for none")


class RawPostInput(BaseModel):
    """Unsanitized save request passed alongside the draft."""

    model_config = ConfigDict(extra="allow")

    id: int | None = Field(default=None, description="Record ID, absent for new records")

    @property
    def record_id(self) -> int:
        """Record ID, 0 when absent."""
        return self.id or 0


class PostRecord(BaseModel):
    """Persisted record returned by a query (post-load hook)."""

    id: int = Field(ge=1, description="Record ID")
    type: str = Field(description="Content type tag")
    title: str = Field(default="", description="Record title")
    slug: str = Field(default="", description="URL slug")
    status: str = Field(default="publish", description="Publication status")
    parent_id: int = Field(default=0, ge=0, description="Parent record ID, 0 for none")


class RepairResult(BaseModel):
    """Summary of a batch repair run."""

    success: bool = Field(description="Whether the run completed")
    records_scanned: int = Field(ge=0, description="Records passed through the handler")
    records_fixed: int = Field(ge=0, description="Records whose slug was replaced")
    fixed_ids: list[int] = Field(default_factory=list, description="IDs of repaired records")
    dry_run: bool = Field(default=False, description="Whether changes were persisted")
    errors: list[str] = Field(default_factory=list, description="Error messages if any")


class PostQuery(BaseModel):
    """Query context passed to post-load subscribers."""

    post_type: str | None = Field(default=None, description="Restrict to one content type")
    ids: list[int] | None = Field(default=None, description="Restrict to these record IDs")
