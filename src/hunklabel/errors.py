"""Error definitions and handling for Hunk Label."""

from typing import Any, Dict, Optional


class HunkLabelError(Exception):
    """Base exception for Hunk Label errors."""

    status_code = 400

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        """Initialize error with code, message, and optional details."""
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for JSON serialization."""
        result = {
            "code": self.code,
            "message": self.message,
        }
        if self.details:
            result["details"] = self.details
        return result


class ParseError(HunkLabelError):
    """Raw input does not match the expected grammar or document shape."""


class DiffParseError(ParseError):
    """Unified diff text is malformed."""

    def __init__(self, reason: str, line_number: Optional[int] = None):
        location = f" at line {line_number}" if line_number is not None else ""
        details: Dict[str, Any] = {"reason": reason}
        if line_number is not None:
            details["line"] = line_number
        super().__init__(
            code="DIFF_PARSE_FAILED",
            message=f"Failed to parse unified diff{location}: {reason}",
            details=details,
        )


class DocumentParseError(ParseError):
    """Exported document is not valid JSON or has the wrong shape."""

    def __init__(self, reason: str, errors: Optional[list] = None):
        details: Dict[str, Any] = {"reason": reason}
        if errors:
            details["errors"] = errors
        super().__init__(
            code="DOCUMENT_INVALID",
            message=f"Invalid labeled diff document: {reason}",
            details=details,
        )


class InputReadError(HunkLabelError):
    """Reading the input file failed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            code="INPUT_READ_FAILED",
            message=reason,
            details={"path": path},
        )


class LabelNotFoundError(HunkLabelError):
    """Label id is not present in the label store."""

    status_code = 404

    def __init__(self, label_id: str):
        super().__init__(
            code="LABEL_NOT_FOUND",
            message=f"Label not found: {label_id}",
            details={"label_id": label_id},
        )


class HunkNotFoundError(HunkLabelError):
    """No hunk in the current diff set matches the given token."""

    status_code = 404

    def __init__(self, token: str):
        super().__init__(
            code="HUNK_NOT_FOUND",
            message=f"Hunk not found: {token}",
            details={"token": token},
        )
