"""Hunk listing and labeling routes for Hunk Label API."""

import logging

from fastapi import APIRouter, Depends

from ...session import HunkRef, LabelingSession
from ..models import HunkLabelRequest, HunkListResponse, HunkResponse
from ..state import get_session

router = APIRouter(tags=["hunks"])

logger = logging.getLogger(__name__)


def _hunk_response(session: LabelingSession, ref: HunkRef) -> HunkResponse:
    return HunkResponse(
        token=ref.key.token,
        old_file_name=ref.file_diff.old_file_name,
        new_file_name=ref.file_diff.new_file_name,
        header=ref.hunk.header,
        old_start=ref.hunk.old_start,
        old_lines=ref.hunk.old_lines,
        new_start=ref.hunk.new_start,
        new_lines=ref.hunk.new_lines,
        lines=list(ref.hunk.lines),
        label_id=session.label_for(ref.key),
    )


@router.get("/hunks", response_model=HunkListResponse)
async def list_hunks(
    visible_only: bool = True, session: LabelingSession = Depends(get_session)
) -> HunkListResponse:
    """List hunks in diff order, by default only those passing the filter."""
    refs = session.visible_hunks() if visible_only else session.hunks()
    return HunkListResponse(
        changes_count=session.changes_count,
        uncategorized_count=session.uncategorized_count,
        hunks=[_hunk_response(session, ref) for ref in refs],
    )


@router.put("/hunks/{token}/label", response_model=HunkResponse)
async def set_hunk_label(
    token: str, request: HunkLabelRequest, session: LabelingSession = Depends(get_session)
) -> HunkResponse:
    """Assign a label to a hunk."""
    ref = session.find_hunk(token)
    session.set_hunk_label(ref.key, request.label_id)
    logger.debug("Hunk labeled", extra={"token": token, "label_id": request.label_id})
    return _hunk_response(session, ref)


@router.delete("/hunks/{token}/label", response_model=HunkResponse)
async def clear_hunk_label(
    token: str, session: LabelingSession = Depends(get_session)
) -> HunkResponse:
    """Make a hunk uncategorized."""
    ref = session.find_hunk(token)
    session.clear_hunk_label(ref.key)
    return _hunk_response(session, ref)
