"""Unit tests for HTTP error translation."""

import pytest

from birddex.domain.error import (
    AuthenticationError,
    DomainError,
    DuplicateActionError,
    NotAuthorizedError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from birddex.interface.error import (
    UnauthenticatedError,
    status_code_for,
    translate_error_message,
)


class TestTranslateErrorMessage:
    def test_hidden_top_photo_message_is_reworded(self):
        raw = "new row violates check: A hidden photo cannot be the top photo for a species"

        assert translate_error_message(raw) == (
            "Set a different top photo before removing the photo"
        )

    def test_other_messages_pass_through(self):
        assert translate_error_message("Voting has closed for this quest") == (
            "Voting has closed for this quest"
        )


class TestStatusCodeFor:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ValidationError("bad"), 400),
            (DuplicateActionError("again"), 409),
            (NotFoundError("Photo", "123"), 404),
            (NotAuthorizedError("delete photos", "u1"), 403),
            (AuthenticationError("Invalid login credentials"), 401),
            (UnauthenticatedError("view the feed"), 401),
            (PersistenceError("connection refused"), 502),
            (DomainError("unexpected"), 500),
        ],
    )
    def test_mapping(self, error, expected):
        assert status_code_for(error) == expected

    def test_unauthenticated_message_names_the_action(self):
        assert str(UnauthenticatedError("view the feed")) == (
            "Authentication required to view the feed"
        )
