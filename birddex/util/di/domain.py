"""Domain layer DI providers."""

from dishka import Scope, provide

from birddex.config import AuthSettings, QuestSettings, StorageSettings
from birddex.domain.repository import (
    CommentRepository,
    FriendshipRepository,
    PhotoRepository,
    QuestEntryRepository,
    QuestRepository,
    QuestVoteRepository,
    TopSpeciesRepository,
    UserProfileRepository,
)
from birddex.domain.service import (
    AuthClient,
    AuthService,
    CollectionService,
    CommentService,
    FriendshipService,
    Geocoder,
    JWTService,
    LeaderboardService,
    LocationService,
    PhotoService,
    QuestService,
    StorageClient,
    StorageService,
    UserProfileService,
)
from birddex.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, auth_client: AuthClient, auth_settings: AuthSettings
    ) -> AuthService:
        return AuthService(
            auth_client=auth_client,
            min_password_length=auth_settings.min_password_length,
        )

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_profile_service(
        self, user_profile_repository: UserProfileRepository
    ) -> UserProfileService:
        return UserProfileService(user_profile_repository=user_profile_repository)

    @provide
    def get_friendship_service(
        self,
        friendship_repository: FriendshipRepository,
        user_profile_service: UserProfileService,
    ) -> FriendshipService:
        return FriendshipService(
            friendship_repository=friendship_repository,
            user_profile_service=user_profile_service,
        )

    @provide
    def get_photo_service(
        self, photo_repository: PhotoRepository, friendship_service: FriendshipService
    ) -> PhotoService:
        """Provide photo domain service."""
        return PhotoService(
            photo_repository=photo_repository, friendship_service=friendship_service
        )

    @provide
    def get_comment_service(self, comment_repository: CommentRepository) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_collection_service(
        self,
        photo_repository: PhotoRepository,
        top_species_repository: TopSpeciesRepository,
    ) -> CollectionService:
        """Provide collection (dex) domain service."""
        return CollectionService(
            photo_repository=photo_repository,
            top_species_repository=top_species_repository,
        )

    @provide
    def get_leaderboard_service(
        self,
        user_profile_repository: UserProfileRepository,
        photo_repository: PhotoRepository,
    ) -> LeaderboardService:
        return LeaderboardService(
            user_profile_repository=user_profile_repository,
            photo_repository=photo_repository,
        )

    @provide
    def get_quest_service(
        self,
        quest_repository: QuestRepository,
        quest_entry_repository: QuestEntryRepository,
        quest_vote_repository: QuestVoteRepository,
        photo_repository: PhotoRepository,
        quest_settings: QuestSettings,
    ) -> QuestService:
        """Provide quest domain service."""
        return QuestService(
            quest_repository=quest_repository,
            quest_entry_repository=quest_entry_repository,
            quest_vote_repository=quest_vote_repository,
            photo_repository=photo_repository,
            settings=quest_settings,
        )

    @provide
    def get_storage_service(
        self, storage_client: StorageClient, storage_settings: StorageSettings
    ) -> StorageService:
        return StorageService(storage_client=storage_client, settings=storage_settings)

    @provide
    def get_location_service(self, geocoder: Geocoder) -> LocationService:
        return LocationService(geocoder=geocoder)
