"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, status
from pydantic import BaseModel

from birddex.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    CommentItem,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from birddex.domain.service import JWTService
from birddex.interface.api.session import SessionToken, require_user

router = APIRouter(prefix="/photos", tags=["comments"], route_class=DishkaRoute)


class AddCommentAPIRequest(BaseModel):
    """API request for adding a comment."""

    content: str


@router.post(
    "/{photo_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    photo_id: str,
    request: AddCommentAPIRequest,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    add_comment_use_case: FromDishka[AddCommentUseCase],
) -> CommentItem:
    """Comment on a photo the user can see.

    Raises:
        ValidationError: If the comment is empty (400)
        NotFoundError: If the photo is missing or not visible (404)
    """
    user_id = require_user(jwt_service, token, "comment on photos")
    return await add_comment_use_case.execute(
        AddCommentRequest(user_id=user_id, photo_id=photo_id, content=request.content)
    )


@router.get("/{photo_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    photo_id: str,
    token: SessionToken,
    jwt_service: FromDishka[JWTService],
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a photo's comments, oldest first."""
    viewer_id = jwt_service.get_user_id_from_token(token)
    return await get_comments_use_case.execute(
        GetCommentsRequest(photo_id=photo_id, viewer_id=viewer_id)
    )
