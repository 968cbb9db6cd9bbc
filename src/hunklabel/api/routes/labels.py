"""Label and filter routes for Hunk Label API."""

import logging
from typing import List

from fastapi import APIRouter, Depends, Response

from ...errors import LabelNotFoundError
from ...session import LabelingSession
from ..models import FilterResponse, LabelRequest, LabelResponse, NewLabelRequest
from ..state import get_session

router = APIRouter(tags=["labels"])

logger = logging.getLogger(__name__)


@router.get("/labels", response_model=List[LabelResponse])
async def list_labels(session: LabelingSession = Depends(get_session)) -> List[LabelResponse]:
    """List labels in creation order."""
    return [LabelResponse(id=label.id, text=label.text) for label in session.list_labels()]


@router.post("/labels", response_model=LabelResponse, status_code=201)
async def create_label(
    request: NewLabelRequest, session: LabelingSession = Depends(get_session)
) -> LabelResponse:
    """Create a label."""
    label_id = session.create_label(request.text)
    logger.info("Label created", extra={"label_id": label_id})
    return LabelResponse(id=label_id, text=request.text)


@router.patch("/labels/{label_id}", response_model=LabelResponse)
async def rename_label(
    label_id: str, request: LabelRequest, session: LabelingSession = Depends(get_session)
) -> LabelResponse:
    """Rename a label, keeping its id and hunk assignments."""
    if label_id not in session.labels:
        raise LabelNotFoundError(label_id)
    session.rename_label(label_id, request.text)
    return LabelResponse(id=label_id, text=request.text)


@router.delete("/labels/{label_id}", status_code=204)
async def delete_label(label_id: str, session: LabelingSession = Depends(get_session)) -> Response:
    """Delete a label; its hunks become uncategorized."""
    session.delete_label(label_id)
    return Response(status_code=204)


@router.get("/filter", response_model=FilterResponse)
async def get_filter(session: LabelingSession = Depends(get_session)) -> FilterResponse:
    """Return the label ids selected in the filter."""
    return FilterResponse(label_ids=sorted(session.filter_ids()))


@router.put("/filter/{label_id}", response_model=FilterResponse)
async def add_to_filter(
    label_id: str, session: LabelingSession = Depends(get_session)
) -> FilterResponse:
    """Show hunks labeled ``label_id`` (plus uncategorized hunks)."""
    session.add_to_filter(label_id)
    return FilterResponse(label_ids=sorted(session.filter_ids()))


@router.delete("/filter/{label_id}", response_model=FilterResponse)
async def remove_from_filter(
    label_id: str, session: LabelingSession = Depends(get_session)
) -> FilterResponse:
    """Stop selecting ``label_id`` in the filter."""
    session.remove_from_filter(label_id)
    return FilterResponse(label_ids=sorted(session.filter_ids()))


@router.delete("/filter", response_model=FilterResponse)
async def clear_filter(session: LabelingSession = Depends(get_session)) -> FilterResponse:
    """Clear the filter so every hunk is shown."""
    session.clear_filter()
    return FilterResponse(label_ids=[])
