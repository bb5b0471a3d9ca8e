"""Strongly typed identifiers for BirdDex domain entities.

Using NewType for strong typing prevents mixing up different entity IDs.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)
PhotoId = NewType("PhotoId", UUID)
CommentId = NewType("CommentId", UUID)
FriendshipId = NewType("FriendshipId", UUID)
QuestId = NewType("QuestId", UUID)
QuestEntryId = NewType("QuestEntryId", UUID)
