"""Unit tests for the comment use cases."""

import pytest

from birddex.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from birddex.domain.error import NotFoundError, ValidationError
from birddex.domain.service import CommentService, PhotoService, UserProfileService
from birddex.domain.value import PhotoPrivacy
from tests.conftest import new_user_id, seed_photo, seed_profile
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_to_visible_photo(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        photo_service = await unit_env.get(PhotoService)
        user_profile_service = await unit_env.get(UserProfileService)
        author = await seed_profile(unit_env, "Robin Fan")
        photo = await seed_photo(unit_env, new_user_id(), privacy=PhotoPrivacy.PUBLIC)

        use_case = AddCommentUseCase(
            comment_service=comment_service,
            photo_service=photo_service,
            user_profile_service=user_profile_service,
        )

        # Act
        result = await use_case.execute(
            AddCommentRequest(
                user_id=str(author.user_id), photo_id=str(photo.id), content="Beautiful!"
            )
        )

        # Assert
        assert result.display_name == "Robin Fan"
        assert result.content == "Beautiful!"
        assert len(await comment_service.get_comments(photo.id)) == 1

    @pytest.mark.asyncio
    async def test_cannot_comment_on_hidden_photo(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        photo = await seed_photo(unit_env, new_user_id(), privacy=PhotoPrivacy.PRIVATE)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                AddCommentRequest(
                    user_id=str(new_user_id()), photo_id=str(photo.id), content="hi"
                )
            )

    @pytest.mark.asyncio
    async def test_empty_comment(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        owner = new_user_id()
        photo = await seed_photo(unit_env, owner)

        with pytest.raises(ValidationError):
            await use_case.execute(
                AddCommentRequest(user_id=str(owner), photo_id=str(photo.id), content="  ")
            )


class TestGetCommentsUseCase:
    @pytest.mark.asyncio
    async def test_authors_without_profile_are_unknown(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        photo = await seed_photo(unit_env, new_user_id(), privacy=PhotoPrivacy.PUBLIC)
        await comment_service.add_comment(photo.id, new_user_id(), "first")
        use_case = await unit_env.get(GetCommentsUseCase)

        response = await use_case.execute(GetCommentsRequest(photo_id=str(photo.id)))

        assert response.total == 1
        assert response.comments[0].display_name == "Unknown User"
