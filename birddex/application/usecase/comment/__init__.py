"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase, CommentItem
from .get_comments import GetCommentsRequest, GetCommentsResponse, GetCommentsUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "CommentItem",
    "GetCommentsRequest",
    "GetCommentsResponse",
    "GetCommentsUseCase",
]
