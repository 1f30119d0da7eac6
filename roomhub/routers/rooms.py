"""Room listing routes."""

from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import Select, func, select
from sqlalchemy.orm import Session

from roomhub import models, schemas
from roomhub.database import get_db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rooms", tags=["Rooms"])


def build_room_listing_query() -> Select:
    """Rooms with their question counts, oldest room first.

    The outer join keeps rooms without questions; `count()` over the question
    id then yields 0 for them since NULLs are not counted.
    """
    return (
        select(
            models.RoomModel.id,
            models.RoomModel.name,
            models.RoomModel.created_at,
            func.count(models.QuestionModel.id).label("question_count"),
        )
        .select_from(models.RoomModel)
        .outerjoin(models.QuestionModel, models.QuestionModel.room_id == models.RoomModel.id)
        .group_by(models.RoomModel.id)
        .order_by(models.RoomModel.created_at.asc())
    )


@router.get("", response_model=List[schemas.RoomSummary])
def list_rooms(db: Session = Depends(get_db)) -> List[schemas.RoomSummary]:
    """List every room with the number of questions it holds."""
    rows = db.execute(build_room_listing_query()).all()
    logger.debug("list_rooms: %d rooms", len(rows))
    return [schemas.RoomSummary.model_validate(dict(row._mapping)) for row in rows]
