"""create_auth_checker_tables

Revision ID: 3b7d2f9c1a40
Revises:
Create Date: 2026-10-18 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7d2f9c1a40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create users, devices and logins tables."""
    op.create_table(
        "users",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("username", sa.String(length=150), nullable=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_created_at", "users", ["created_at"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)
    op.create_index("ix_users_username", "users", ["username"], unique=True)

    op.create_table(
        "devices",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        # Owner
        sa.Column("user_id", sa.Uuid(), nullable=False),
        # Agent descriptor at registration
        sa.Column("platform", sa.String(length=100), nullable=True),
        sa.Column("platform_version", sa.String(length=50), nullable=True),
        sa.Column("browser", sa.String(length=100), nullable=True),
        sa.Column("browser_version", sa.String(length=50), nullable=True),
        sa.Column("is_desktop", sa.Boolean(), server_default="0", nullable=False),
        sa.Column("is_mobile", sa.Boolean(), server_default="0", nullable=False),
        sa.Column("language", sa.String(length=35), nullable=True),
        sa.Column("fingerprint", sa.String(length=255), nullable=True),
        sa.Column(
            "ip_address",
            sa.String(length=45),
            nullable=True,
            comment="IP address at registration",
        ),
        sa.Column("pin", sa.String(length=6), nullable=True),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_devices_id", "devices", ["id"])
    op.create_index("ix_devices_created_at", "devices", ["created_at"])
    op.create_index("ix_devices_user_id", "devices", ["user_id"])
    op.create_index("ix_devices_fingerprint", "devices", ["fingerprint"])

    op.create_table(
        "logins",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("device_id", sa.Uuid(), nullable=False),
        sa.Column("ip_address", sa.String(length=45), nullable=True),
        sa.Column("ip_insights", sa.JSON(), nullable=False),
        sa.Column(
            "type",
            sa.String(length=20),
            nullable=False,
            comment="login, failed or lockout",
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["device_id"], ["devices.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_logins_id", "logins", ["id"])
    op.create_index("ix_logins_created_at", "logins", ["created_at"])
    op.create_index("ix_logins_user_id", "logins", ["user_id"])
    op.create_index("ix_logins_device_id", "logins", ["device_id"])
    op.create_index("ix_logins_type", "logins", ["type"])


def downgrade() -> None:
    """Drop auth checker tables."""
    op.drop_table("logins")
    op.drop_table("devices")
    op.drop_table("users")
