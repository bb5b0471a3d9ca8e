"""Domain services."""

from .auth_service import AuthClient, AuthService
from .base import Service
from .collection_service import CollectionService, DexCell, SpeciesPhotos
from .comment_service import CommentService
from .friendship_service import FriendshipService, FriendsOverview
from .jwt_service import JWTService
from .leaderboard_service import Leaderboard, LeaderboardService, compute_leaderboard
from .location_service import NO_LOCATION, UNKNOWN_LOCATION, Geocoder, LocationService
from .photo_service import PhotoService
from .quest_service import (
    QuestAward,
    QuestListing,
    QuestService,
    classify_quest,
    tally_votes,
)
from .storage_service import StorageClient, StorageService
from .user_profile_service import UserProfileService

__all__ = [
    "AuthClient",
    "AuthService",
    "CollectionService",
    "CommentService",
    "DexCell",
    "FriendsOverview",
    "FriendshipService",
    "Geocoder",
    "JWTService",
    "Leaderboard",
    "LeaderboardService",
    "LocationService",
    "NO_LOCATION",
    "PhotoService",
    "QuestAward",
    "QuestListing",
    "QuestService",
    "Service",
    "SpeciesPhotos",
    "StorageClient",
    "StorageService",
    "UNKNOWN_LOCATION",
    "UserProfileService",
    "classify_quest",
    "compute_leaderboard",
    "tally_votes",
]
