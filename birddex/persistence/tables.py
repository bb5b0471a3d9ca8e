"""SQLAlchemy table definitions for BirdDex.

They match the schema created by the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# USER PROFILES TABLE
# ============================================================================
user_profiles_table = Table(
    "user_profiles",
    metadata,
    Column("user_id", UUID, primary_key=True),  # Id from the hosted auth service
    Column("display_name", String(64), nullable=True),
    Column("is_admin", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "uq_user_profiles_display_name_lower",
    func.lower(user_profiles_table.c.display_name),
    unique=True,
)

# ============================================================================
# PHOTOS TABLE
# ============================================================================
photos_table = Table(
    "photos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "user_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("species_id", String(64), nullable=False),
    Column("url", Text, nullable=False),  # Storage path, signed per response
    Column("thumbnail_url", Text, nullable=True),
    Column("privacy", String(16), nullable=False, server_default="friends"),
    Column("hidden_from_feed", Boolean, nullable=False, server_default="false"),
    Column("hidden_from_species_view", Boolean, nullable=False, server_default="false"),
    Column("lat", Float, nullable=True),
    Column("lng", Float, nullable=True),
    Column("description", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "privacy IN ('public', 'friends', 'private')", name="ck_photos_privacy"
    ),
)

Index("idx_photos_user_species", photos_table.c.user_id, photos_table.c.species_id)
Index("idx_photos_created_at", photos_table.c.created_at.desc())

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "photo_id", UUID, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_photo_id", comments_table.c.photo_id)

# ============================================================================
# FRIENDSHIPS TABLE
# ============================================================================
friendships_table = Table(
    "friendships",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "requester_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "addressee_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("status", String(16), nullable=False, server_default="pending"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("requester_id <> addressee_id", name="ck_friendships_not_self"),
    CheckConstraint(
        "status IN ('pending', 'accepted')", name="ck_friendships_status"
    ),
)

Index("idx_friendships_requester", friendships_table.c.requester_id)
Index("idx_friendships_addressee", friendships_table.c.addressee_id)
Index(
    "uq_friendships_pair",
    func.least(friendships_table.c.requester_id, friendships_table.c.addressee_id),
    func.greatest(friendships_table.c.requester_id, friendships_table.c.addressee_id),
    unique=True,
)

# ============================================================================
# QUESTS TABLE
# ============================================================================
quests_table = Table(
    "quests",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("name", String(200), nullable=False),
    Column("description", Text, nullable=True),
    Column("start_time", TIMESTAMP(timezone=True), nullable=False),
    Column("end_time", TIMESTAMP(timezone=True), nullable=False),
    Column("participation_award_url", Text, nullable=True),
    Column("top10_award_url", Text, nullable=True),
    Column("winner_entry_id", UUID, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("end_time > start_time", name="ck_quests_window"),
)

Index("idx_quests_start_time", quests_table.c.start_time)

# ============================================================================
# QUEST ENTRIES TABLE
# ============================================================================
quest_entries_table = Table(
    "quest_entries",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "quest_id", UUID, ForeignKey("quests.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "user_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("photo_id", UUID, ForeignKey("photos.id"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("quest_id", "user_id", name="uq_quest_entries_quest_user"),
)

Index("idx_quest_entries_photo_id", quest_entries_table.c.photo_id)

# ============================================================================
# QUEST VOTES TABLE (one vote per voter per quest)
# ============================================================================
quest_votes_table = Table(
    "quest_votes",
    metadata,
    Column(
        "voter_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "quest_id", UUID, ForeignKey("quests.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "entry_id",
        UUID,
        ForeignKey("quest_entries.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("voter_id", "quest_id", name="pk_quest_votes"),
)

Index("idx_quest_votes_entry_id", quest_votes_table.c.entry_id)

# ============================================================================
# TOP SPECIES TABLE (one top photo per user per species)
# ============================================================================
top_species_table = Table(
    "top_species",
    metadata,
    Column(
        "user_id",
        UUID,
        ForeignKey("user_profiles.user_id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("species_id", String(64), nullable=False),
    Column(
        "photo_id", UUID, ForeignKey("photos.id", ondelete="CASCADE"), nullable=False
    ),
    PrimaryKeyConstraint("user_id", "species_id", name="pk_top_species"),
)
