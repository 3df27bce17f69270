from typing import Optional

import structlog
from fastapi import APIRouter, Depends, status

from sharkfinn.exceptions import ValidationError
from sharkfinn.schemas.sessions import SessionCreate, SessionResponse, SessionUpdate
from sharkfinn.utils.deps import Repos, require_store

router = APIRouter(dependencies=[Depends(require_store)])
logger = structlog.get_logger()


@router.post(
    "", response_model=SessionResponse, status_code=status.HTTP_201_CREATED
)
async def create_session(
    repositories: Repos, session_data: Optional[SessionCreate] = None
):
    """Open a session for a child"""
    session_data = session_data or SessionCreate()
    if not session_data.child_id:
        raise ValidationError("child_id required", field="child_id")

    row = await repositories.sessions.create(session_data.child_id, session_data.notes)
    logger.info("Session created", session_id=row["id"], child_id=row["child_id"])
    return SessionResponse(**row)


@router.patch("/{session_id}", response_model=SessionResponse)
async def update_session(
    session_id: int,
    repositories: Repos,
    session_data: Optional[SessionUpdate] = None,
):
    """Update status and/or notes, leaving omitted fields unchanged"""
    session_data = session_data or SessionUpdate()
    row = await repositories.sessions.update(
        session_id, session_data.status, session_data.notes
    )
    return SessionResponse(**row)
