"""User and follow-graph API routes."""

from typing import Any

from fastapi import APIRouter, Request

from ...db import (
    create_follow,
    delete_follow,
    get_connection,
    list_followed,
    list_followers,
    list_friends,
    transaction,
)
from ...models import UserListResponse, UserResponse
from ..deps import current_user, user_or_404

router = APIRouter(tags=["users"])


def user_list_response(users) -> UserListResponse:
    return UserListResponse(users=[UserResponse.from_user(u) for u in users], count=len(users))


@router.get("/users/{nickname}")
async def get_user(request: Request, nickname: str) -> UserResponse:
    with get_connection(request.app.state.db_path) as conn:
        user = user_or_404(conn, nickname)
    return UserResponse.from_user(user)


@router.get("/users/{nickname}/followers")
async def followers(request: Request, nickname: str) -> UserListResponse:
    with get_connection(request.app.state.db_path) as conn:
        user = user_or_404(conn, nickname)
        users = list_followers(conn, user.id)
    return user_list_response(users)


@router.get("/users/{nickname}/follows")
async def follows(request: Request, nickname: str) -> UserListResponse:
    with get_connection(request.app.state.db_path) as conn:
        user = user_or_404(conn, nickname)
        users = list_followed(conn, user.id)
    return user_list_response(users)


@router.get("/users/{nickname}/friends")
async def friends(request: Request, nickname: str) -> UserListResponse:
    """Users who follow ``nickname`` and are followed back."""
    with get_connection(request.app.state.db_path) as conn:
        user = user_or_404(conn, nickname)
        users = list_friends(conn, user.id)
    return user_list_response(users)


@router.post("/follow/{nickname}")
async def follow(request: Request, nickname: str) -> dict[str, Any]:
    """Make the acting user follow ``nickname``. Following twice is a no-op."""
    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        target = user_or_404(conn, nickname)
        with transaction(conn):
            created = create_follow(conn, user.id, target.id)
    return {"following": target.nickname, "created": created}


@router.delete("/follow/{nickname}")
async def unfollow(request: Request, nickname: str) -> dict[str, Any]:
    with get_connection(request.app.state.db_path) as conn:
        user = current_user(request, conn)
        target = user_or_404(conn, nickname)
        with transaction(conn):
            removed = delete_follow(conn, user.id, target.id)
    return {"unfollowed": target.nickname, "removed": removed}
