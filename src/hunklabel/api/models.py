"""Pydantic models for Hunk Label API requests and responses."""

from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class LoadRequest(BaseModel):
    """Request model for loading raw input into the session."""

    text: str = Field(
        ...,
        description="Unified diff text or a previously exported JSON document",
    )
    filename: Optional[str] = Field(
        None,
        description="Name of the file the text was read from; selects the input mode",
        examples=["changes.diff", "annotated_diff.json"],
    )
    is_document: Optional[bool] = Field(
        None,
        description="Force document mode (true) or unified diff mode (false)",
    )


class LabelRequest(BaseModel):
    """Request model for renaming a label; any text is accepted."""

    text: str = Field(..., description="Label text", examples=["bugfix"])


class NewLabelRequest(LabelRequest):
    """Request model for creating a label."""

    @field_validator("text")
    @classmethod
    def text_must_not_be_empty(cls, v):
        """Reject empty label text."""
        if not v:
            raise ValueError("label text cannot be empty")
        return v


class HunkLabelRequest(BaseModel):
    """Request model for assigning a label to a hunk."""

    label_id: str = Field(..., description="Id of an existing label")


class LabelResponse(BaseModel):
    """A label as shown to the presentation layer."""

    id: str
    text: str


class HunkResponse(BaseModel):
    """A hunk with its file names, coordinates and current label."""

    token: str
    old_file_name: str
    new_file_name: str
    header: str
    old_start: int
    old_lines: int
    new_start: int
    new_lines: int
    lines: List[str]
    label_id: Optional[str] = None


class HunkListResponse(BaseModel):
    """Visible hunks plus session counters."""

    changes_count: int
    uncategorized_count: int
    hunks: List[HunkResponse]


class SessionSummary(BaseModel):
    """Summary of the session after a load or reset."""

    files: int
    changes_count: int
    uncategorized_count: int
    labels: List[LabelResponse]


class FilterResponse(BaseModel):
    """Label ids currently selected in the filter."""

    label_ids: List[str]


class HealthResponse(BaseModel):
    """Response model for health check endpoint."""

    status: str = Field(..., examples=["healthy"])
    version: str = Field(..., examples=["1.0.0"])


class VersionResponse(BaseModel):
    """Response model for version endpoint."""

    version: str = Field(..., examples=["1.0.0"])
    api_version: str = Field(..., examples=["v1"])
    supported_features: list = Field(
        default_factory=lambda: [
            "unified_diff_import",
            "document_import",
            "hunk_labels",
            "label_filter",
            "json_export",
        ]
    )
