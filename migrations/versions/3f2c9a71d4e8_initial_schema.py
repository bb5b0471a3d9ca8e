"""initial_schema

Create the BirdDex schema:
- User profiles (accounts live in the hosted auth service)
- Photos with privacy and dex/feed visibility flags
- Comments on photos
- Friendships (one record per unordered pair)
- Quests, quest entries and quest votes (one vote per voter per quest)
- Top species mapping (one top photo per user per species)
- Trigger rejecting a hidden photo as top photo
- delete_or_hide_photo() function

Revision ID: 3f2c9a71d4e8
Revises:
Create Date: 2025-06-02 18:12:44.501233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9a71d4e8"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _uuid_pk() -> sa.Column:
    return sa.Column(
        "id", sa.UUID(), server_default=sa.text("gen_random_uuid()"), nullable=False
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # USER_PROFILES table
    # ========================================================================
    op.create_table(
        "user_profiles",
        sa.Column("user_id", sa.UUID(), nullable=False),  # Hosted auth user id
        sa.Column("display_name", sa.String(64), nullable=True),
        sa.Column("is_admin", sa.Boolean(), nullable=False, server_default="false"),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("user_id"),
    )
    op.execute(
        "CREATE UNIQUE INDEX uq_user_profiles_display_name_lower "
        "ON user_profiles (lower(display_name))"
    )

    # ========================================================================
    # PHOTOS table
    # ========================================================================
    op.create_table(
        "photos",
        _uuid_pk(),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("species_id", sa.String(64), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),  # Storage path
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("privacy", sa.String(16), nullable=False, server_default="friends"),
        sa.Column("hidden_from_feed", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "hidden_from_species_view", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("lat", sa.Float(), nullable=True),
        sa.Column("lng", sa.Float(), nullable=True),
        sa.Column("description", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["user_profiles.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "privacy IN ('public', 'friends', 'private')", name="ck_photos_privacy"
        ),
    )
    op.create_index("idx_photos_user_species", "photos", ["user_id", "species_id"])
    op.execute("CREATE INDEX idx_photos_created_at ON photos (created_at DESC)")

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        _uuid_pk(),
        sa.Column("photo_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_profiles.user_id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_photo_id", "comments", ["photo_id"])

    # ========================================================================
    # FRIENDSHIPS table
    # ========================================================================
    op.create_table(
        "friendships",
        _uuid_pk(),
        sa.Column("requester_id", sa.UUID(), nullable=False),
        sa.Column("addressee_id", sa.UUID(), nullable=False),
        sa.Column("status", sa.String(16), nullable=False, server_default="pending"),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["requester_id"], ["user_profiles.user_id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(
            ["addressee_id"], ["user_profiles.user_id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("requester_id <> addressee_id", name="ck_friendships_not_self"),
        sa.CheckConstraint("status IN ('pending', 'accepted')", name="ck_friendships_status"),
    )
    op.create_index("idx_friendships_requester", "friendships", ["requester_id"])
    op.create_index("idx_friendships_addressee", "friendships", ["addressee_id"])
    op.execute(
        "CREATE UNIQUE INDEX uq_friendships_pair ON friendships "
        "(LEAST(requester_id, addressee_id), GREATEST(requester_id, addressee_id))"
    )

    # ========================================================================
    # QUESTS table
    # ========================================================================
    op.create_table(
        "quests",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("start_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("end_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column("participation_award_url", sa.Text(), nullable=True),
        sa.Column("top10_award_url", sa.Text(), nullable=True),
        sa.Column("winner_entry_id", sa.UUID(), nullable=True),  # Set by an admin
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("end_time > start_time", name="ck_quests_window"),
    )
    op.create_index("idx_quests_start_time", "quests", ["start_time"])

    # ========================================================================
    # QUEST_ENTRIES table
    # ========================================================================
    op.create_table(
        "quest_entries",
        _uuid_pk(),
        sa.Column("quest_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("photo_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["quest_id"], ["quests.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["user_profiles.user_id"], ondelete="CASCADE"),
        # No cascade: entered photos are hidden by delete_or_hide_photo, never deleted
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("quest_id", "user_id", name="uq_quest_entries_quest_user"),
    )
    op.create_index("idx_quest_entries_photo_id", "quest_entries", ["photo_id"])

    # ========================================================================
    # QUEST_VOTES table
    # ========================================================================
    op.create_table(
        "quest_votes",
        sa.Column("voter_id", sa.UUID(), nullable=False),
        sa.Column("quest_id", sa.UUID(), nullable=False),
        sa.Column("entry_id", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["voter_id"], ["user_profiles.user_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["quest_id"], ["quests.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["entry_id"], ["quest_entries.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("voter_id", "quest_id", name="pk_quest_votes"),
    )
    op.create_index("idx_quest_votes_entry_id", "quest_votes", ["entry_id"])

    # ========================================================================
    # TOP_SPECIES table
    # ========================================================================
    op.create_table(
        "top_species",
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("species_id", sa.String(64), nullable=False),
        sa.Column("photo_id", sa.UUID(), nullable=False),
        sa.ForeignKeyConstraint(["user_id"], ["user_profiles.user_id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["photo_id"], ["photos.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("user_id", "species_id", name="pk_top_species"),
    )

    # ========================================================================
    # TRIGGERS: a hidden photo cannot be a top photo
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION reject_hidden_top_photo()
        RETURNS TRIGGER AS $$
        BEGIN
            IF EXISTS (
                SELECT 1 FROM photos
                WHERE id = NEW.photo_id AND hidden_from_species_view
            ) THEN
                RAISE EXCEPTION 'A hidden photo cannot be the top photo for a species';
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)

    op.execute("""
        CREATE TRIGGER check_top_species_photo
        BEFORE INSERT OR UPDATE ON top_species
        FOR EACH ROW
        EXECUTE FUNCTION reject_hidden_top_photo();
    """)

    op.execute("""
        CREATE OR REPLACE FUNCTION reject_hiding_top_photo()
        RETURNS TRIGGER AS $$
        BEGIN
            IF NEW.hidden_from_species_view AND EXISTS (
                SELECT 1 FROM top_species WHERE photo_id = NEW.id
            ) THEN
                RAISE EXCEPTION 'A hidden photo cannot be the top photo for a species';
            END IF;
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql;
    """)

    op.execute("""
        CREATE TRIGGER check_photo_hidden_top
        BEFORE UPDATE OF hidden_from_species_view ON photos
        FOR EACH ROW
        EXECUTE FUNCTION reject_hiding_top_photo();
    """)

    # ========================================================================
    # FUNCTION: delete a photo, or hide it when a quest entry uses it
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION delete_or_hide_photo(p_photo_id UUID)
        RETURNS JSONB AS $$
        BEGIN
            IF NOT EXISTS (SELECT 1 FROM photos WHERE id = p_photo_id) THEN
                RETURN jsonb_build_object('message', 'Photo not found');
            END IF;

            DELETE FROM top_species WHERE photo_id = p_photo_id;

            IF EXISTS (SELECT 1 FROM quest_entries WHERE photo_id = p_photo_id) THEN
                UPDATE photos
                SET hidden_from_feed = true, hidden_from_species_view = true
                WHERE id = p_photo_id;
                RETURN jsonb_build_object('status', 'hidden');
            END IF;

            DELETE FROM comments WHERE photo_id = p_photo_id;
            DELETE FROM photos WHERE id = p_photo_id;
            RETURN jsonb_build_object('status', 'deleted');
        END;
        $$ LANGUAGE plpgsql;
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP FUNCTION IF EXISTS delete_or_hide_photo(UUID)")

    op.execute("DROP TRIGGER IF EXISTS check_photo_hidden_top ON photos")
    op.execute("DROP TRIGGER IF EXISTS check_top_species_photo ON top_species")
    op.execute("DROP FUNCTION IF EXISTS reject_hiding_top_photo()")
    op.execute("DROP FUNCTION IF EXISTS reject_hidden_top_photo()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("top_species")
    op.drop_table("quest_votes")
    op.drop_table("quest_entries")
    op.drop_table("quests")
    op.drop_table("friendships")
    op.drop_table("comments")
    op.drop_table("photos")
    op.drop_table("user_profiles")
