"""Session load, reset and export routes for Hunk Label API."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from ...session import LabelingSession
from ..models import LabelResponse, LoadRequest, SessionSummary
from ..state import get_session

router = APIRouter(tags=["session"])

logger = logging.getLogger(__name__)


def _summary(session: LabelingSession) -> SessionSummary:
    return SessionSummary(
        files=len(session.file_diffs),
        changes_count=session.changes_count,
        uncategorized_count=session.uncategorized_count,
        labels=[LabelResponse(id=label.id, text=label.text) for label in session.list_labels()],
    )


@router.post("/session/load", response_model=SessionSummary)
async def load_input(
    request: LoadRequest, session: LabelingSession = Depends(get_session)
) -> SessionSummary:
    """Replace the session contents with a unified diff or exported document."""
    if request.is_document is not None:
        is_document = request.is_document
    elif request.filename:
        is_document = session.config.is_document_path(request.filename)
    else:
        is_document = False

    logger.info(
        "Received load request",
        extra={"source": request.filename, "is_document": is_document},
    )
    session.load_text(request.text, is_document=is_document)
    return _summary(session)


@router.delete("/session", response_model=SessionSummary)
async def reset_session(session: LabelingSession = Depends(get_session)) -> SessionSummary:
    """Drop the loaded diff, labels and associations."""
    session.reset()
    return _summary(session)


@router.get("/export")
async def export_document(session: LabelingSession = Depends(get_session)) -> JSONResponse:
    """Return the labeled export document as a downloadable JSON file."""
    document = session.export_document()
    logger.info("Export requested", extra={"keys": len(document)})
    return JSONResponse(
        content=document,
        headers={
            "Content-Disposition": f'attachment; filename="{session.config.export_filename}"'
        },
    )
