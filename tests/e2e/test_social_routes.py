"""End-to-end tests for friends, feed and leaderboard routes."""

import pytest

from tests.harness import bearer, create_api_fixture

api = create_api_fixture()


async def named_user(api, email, name):
    token = await api.sign_up(email)
    response = await api.client.patch(
        "/profiles/me", json={"display_name": name}, headers=bearer(token)
    )
    assert response.status_code == 200, response.text
    return token


async def befriend(api, requester, addressee, addressee_name):
    sent = await api.client.post(
        "/friends/requests", json={"display_name": addressee_name}, headers=bearer(requester)
    )
    assert sent.status_code == 201, sent.text
    friendship_id = sent.json()["friendship_id"]
    accepted = await api.client.post(
        f"/friends/requests/{friendship_id}/accept", headers=bearer(addressee)
    )
    assert accepted.status_code == 200, accepted.text
    return friendship_id


class TestFriendRoutes:
    @pytest.mark.asyncio
    async def test_request_accept_and_remove(self, api):
        # Arrange
        ann = await named_user(api, "ann@example.com", "Ann")
        bo = await named_user(api, "bo@example.com", "Bo")

        # Act
        friendship_id = await befriend(api, ann, bo, "bo")
        listed = await api.client.get("/friends", headers=bearer(ann))
        removed = await api.client.delete(f"/friends/{friendship_id}", headers=bearer(bo))
        after = await api.client.get("/friends", headers=bearer(ann))

        # Assert
        assert [f["display_name"] for f in listed.json()["friends"]] == ["Bo"]
        assert removed.status_code == 200
        assert after.json()["friends"] == []

    @pytest.mark.asyncio
    async def test_pending_requests_are_split(self, api):
        ann = await named_user(api, "ann@example.com", "Ann")
        bo = await named_user(api, "bo@example.com", "Bo")
        await api.client.post(
            "/friends/requests", json={"display_name": "Bo"}, headers=bearer(ann)
        )

        outgoing = await api.client.get("/friends", headers=bearer(ann))
        incoming = await api.client.get("/friends", headers=bearer(bo))

        assert [f["display_name"] for f in outgoing.json()["outgoing"]] == ["Bo"]
        assert [f["display_name"] for f in incoming.json()["incoming"]] == ["Ann"]

    @pytest.mark.asyncio
    async def test_request_errors(self, api):
        ann = await named_user(api, "ann@example.com", "Ann")
        bo = await named_user(api, "bo@example.com", "Bo")
        await befriend(api, ann, bo, "Bo")

        unknown = await api.client.post(
            "/friends/requests", json={"display_name": "Nobody"}, headers=bearer(ann)
        )
        to_self = await api.client.post(
            "/friends/requests", json={"display_name": "Ann"}, headers=bearer(ann)
        )
        again = await api.client.post(
            "/friends/requests", json={"display_name": "Bo"}, headers=bearer(ann)
        )

        assert unknown.status_code == 404
        assert unknown.json()["detail"] == "User not found. Please check the display name."
        assert to_self.status_code == 400
        assert again.status_code == 409
        assert again.json()["detail"] == "You are already friends with this user."


class TestFeedRoutes:
    @pytest.mark.asyncio
    async def test_feed_shows_friends_photos(self, api):
        ann = await named_user(api, "ann@example.com", "Ann")
        bo = await named_user(api, "bo@example.com", "Bo")
        await befriend(api, ann, bo, "Bo")
        uploaded = await api.client.post(
            "/photos",
            files={"image": ("bird.jpg", b"jpeg-bytes", "image/jpeg")},
            data={"species_id": "blujay", "privacy": "friends"},
            headers=bearer(bo),
        )

        response = await api.client.get("/photos/feed", headers=bearer(ann))

        assert response.status_code == 200
        photos = response.json()["photos"]
        assert [p["photo_id"] for p in photos] == [uploaded.json()["photo_id"]]
        assert photos[0]["owner_display_name"] == "Bo"

    @pytest.mark.asyncio
    async def test_feed_requires_session(self, api):
        response = await api.client.get("/photos/feed")

        assert response.status_code == 401


class TestLeaderboardRoutes:
    @pytest.mark.asyncio
    async def test_ranking_and_viewer_rank(self, api):
        # Arrange
        ann = await named_user(api, "ann@example.com", "Ann")
        bo = await named_user(api, "bo@example.com", "Bo")
        for species in ("amerob", "blujay"):
            await api.client.post(
                "/photos",
                files={"image": ("bird.jpg", b"jpeg-bytes", "image/jpeg")},
                data={"species_id": species},
                headers=bearer(ann),
            )

        # Act
        response = await api.client.get("/leaderboard", headers=bearer(bo))

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["available"] is True
        ranking = [
            (e["display_name"], e["unique_species_count"], e["rank"]) for e in body["entries"]
        ]
        assert ranking == [("Ann", 2, 1), ("Bo", 0, 2)]
        assert body["viewer_rank"] == 2

    @pytest.mark.asyncio
    async def test_anonymous_viewer_has_no_rank(self, api):
        await named_user(api, "ann@example.com", "Ann")

        response = await api.client.get("/leaderboard")

        assert response.json()["viewer_rank"] is None
