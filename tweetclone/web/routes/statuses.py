"""Status and timeline API routes."""

from typing import Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...db import get_connection, list_mentioned_statuses, list_public_statuses
from ...models import StatusResponse, SubmissionResponse, TimelineResponse, UserResponse
from ...pipeline import SubmissionResult, classify_and_persist
from ...timeline import assemble_timeline
from ..deps import current_user, user_or_404

router = APIRouter(tags=["statuses"])


class StatusUpdate(BaseModel):
    """Request body for posting a status."""

    text: str


def submission_response(result: SubmissionResult) -> SubmissionResponse:
    return SubmissionResponse(
        kind=result.kind.value,
        status=StatusResponse.from_status(result.status) if result.status else None,
        followed=UserResponse.from_user(result.followed) if result.followed else None,
        error=result.error.value if result.error else None,
    )


def timeline_response(statuses) -> TimelineResponse:
    return TimelineResponse(
        statuses=[StatusResponse.from_status(s) for s in statuses],
        count=len(statuses),
    )


# Plain def: the shortener makes blocking HTTP calls, so FastAPI runs this in its threadpool.
@router.post("/statuses/update")
def update_status(request: Request, update: StatusUpdate) -> Any:
    """
    Post status text as the acting user.

    - ``D <nickname> <text>`` sends a direct message
    - ``follow <nickname>`` follows that user; no status is stored
    - anything else is a public post
    """
    settings = request.app.state.settings

    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        result = classify_and_persist(
            conn,
            user,
            update.text,
            shorten=request.app.state.shorten,
            max_length=settings.statuses.max_length,
            follow_case_insensitive=settings.follow.case_insensitive,
        )

    body = submission_response(result)
    if not result.ok:
        payload = body.model_dump(mode="json")
        payload["message"] = result.message
        return JSONResponse(status_code=404, content=payload)
    return body


@router.get("/statuses/user_timeline")
async def user_timeline(request: Request) -> TimelineResponse:
    """The acting user's own statuses merged with those of everyone they follow."""
    settings = request.app.state.settings

    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        statuses = assemble_timeline(
            conn,
            user,
            per_source_limit=settings.timeline.per_source_limit,
            page_size=settings.timeline.page_size,
        )
    return timeline_response(statuses)


@router.get("/statuses/public_timeline")
async def public_timeline(request: Request, limit: int = Query(20, ge=1, le=200)) -> TimelineResponse:
    """Most recent public statuses from everyone."""
    with get_connection(request.app.state.db_path) as conn:
        current_user(request, conn)
        statuses = list_public_statuses(conn, limit=limit)
    return timeline_response(statuses)


@router.get("/users/{nickname}/statuses")
async def user_statuses(request: Request, nickname: str) -> TimelineResponse:
    """A user's page as seen by the acting user."""
    settings = request.app.state.settings

    with get_connection(request.app.state.db_path) as conn:
        viewer = current_user(request, conn)
        subject = user_or_404(conn, nickname)
        statuses = assemble_timeline(
            conn,
            viewer,
            subject,
            per_source_limit=settings.timeline.per_source_limit,
            page_size=settings.timeline.page_size,
        )
    return timeline_response(statuses)


@router.get("/replies")
async def replies(request: Request) -> TimelineResponse:
    """Statuses that mention the acting user."""
    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        statuses = list_mentioned_statuses(conn, user.id)
    return timeline_response(statuses)
