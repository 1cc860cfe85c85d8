"""Direct message API routes."""

from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from ...db import count_direct_messages, get_connection, list_direct_messages
from ...models import StatusResponse
from ...pipeline import send_direct_message
from ..deps import current_user
from .statuses import submission_response, timeline_response

router = APIRouter(tags=["messages"])


class MessageCreate(BaseModel):
    """Request body for sending a direct message."""

    recipient: str
    text: str


@router.get("/messages/{direction}")
async def list_messages(request: Request, direction: Literal["received", "sent"]) -> dict[str, Any]:
    """Direct messages the acting user received or sent."""
    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        statuses = list_direct_messages(conn, user.id, direction)
        total = count_direct_messages(conn, user.id)

    return {
        **timeline_response(statuses).model_dump(mode="json"),
        "direction": direction,
        "message_count": total,
    }


# Plain def: runs in the threadpool, like /statuses/update.
@router.post("/messages")
def send_message(request: Request, message: MessageCreate) -> Any:
    settings = request.app.state.settings

    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        result = send_direct_message(
            conn,
            user,
            message.recipient,
            message.text,
            shorten=request.app.state.shorten,
            max_length=settings.statuses.max_length,
        )

    if not result.ok:
        payload = submission_response(result).model_dump(mode="json")
        payload["message"] = result.message
        return JSONResponse(status_code=404, content=payload)
    return {"status": StatusResponse.from_status(result.status).model_dump(mode="json")}
