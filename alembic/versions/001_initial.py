"""Initial schema: users, pharmacies, requests, chats, notifications.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-16

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001_initial"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        "users",
        sa.Column("id", sa.String(128), primary_key=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("name", sa.String(100), nullable=False, server_default=""),
        sa.Column("role", sa.String(16), nullable=False, server_default="customer"),
        sa.Column("pharmacy_id", sa.String(64), nullable=True),
        sa.Column("profile", sa.JSON(), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_users_phone", "users", ["phone"])
    op.create_index("ix_users_created_at", "users", ["created_at"])

    op.create_table(
        "pharmacies",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("owner_id", sa.String(128), nullable=False),
        sa.Column("owner_phone", sa.String(32), nullable=True),
        sa.Column("owner_name", sa.String(100), nullable=True),
        sa.Column("phone", sa.String(32), nullable=True),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("state", sa.String(100), nullable=True),
        sa.Column("pincode", sa.String(16), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=False, server_default="0"),
        sa.Column("longitude", sa.Float(), nullable=False, server_default="0"),
        sa.Column("license_number", sa.String(64), nullable=False),
        sa.Column("gst_number", sa.String(64), nullable=True),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("verified_by", sa.String(128), nullable=True),
        sa.Column("verified_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("rejection_reason", sa.Text(), nullable=True),
        sa.Column("onboarded_by", sa.String(128), nullable=True),
        sa.Column("is_open", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("availability", sa.String(16), nullable=False, server_default="offline"),
        sa.Column("operating_hours", sa.JSON(), nullable=True),
        sa.Column("rating", sa.Float(), nullable=False, server_default="0"),
        sa.Column("total_ratings", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_requests", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("total_accepted", sa.Integer(), nullable=False, server_default="0"),
        *_timestamps(),
    )
    op.create_index("ix_pharmacies_owner_id", "pharmacies", ["owner_id"])
    op.create_index("ix_pharmacies_status", "pharmacies", ["status"])
    op.create_index("ix_pharmacies_onboarded_by", "pharmacies", ["onboarded_by"])
    op.create_index("ix_pharmacies_created_at", "pharmacies", ["created_at"])

    op.create_table(
        "medication_requests",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("customer_id", sa.String(128), nullable=False),
        sa.Column("customer_phone", sa.String(32), nullable=True),
        sa.Column("customer_name", sa.String(100), nullable=True),
        sa.Column("medicines", sa.JSON(), nullable=False),
        sa.Column("has_prescription", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("prescription_url", sa.Text(), nullable=True),
        sa.Column("patient_name", sa.String(100), nullable=False),
        sa.Column("patient_phone", sa.String(32), nullable=False),
        sa.Column("patient_address", sa.String(500), nullable=False),
        sa.Column("patient_latitude", sa.Float(), nullable=False, server_default="0"),
        sa.Column("patient_longitude", sa.Float(), nullable=False, server_default="0"),
        sa.Column("is_emergency", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("urgency", sa.String(16), nullable=False, server_default="normal"),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("radius_km", sa.Float(), nullable=False, server_default="5"),
        sa.Column("status", sa.String(20), nullable=False),
        sa.Column("pharmacy_id", sa.String(64), nullable=True),
        sa.Column("pharmacy_name", sa.String(200), nullable=True),
        sa.Column("response", sa.JSON(), nullable=True),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("completed_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_medication_requests_customer_id", "medication_requests", ["customer_id"])
    op.create_index("ix_medication_requests_status", "medication_requests", ["status"])
    op.create_index("ix_medication_requests_pharmacy_id", "medication_requests", ["pharmacy_id"])
    op.create_index("ix_medication_requests_created_at", "medication_requests", ["created_at"])

    op.create_table(
        "chats",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("request_id", sa.String(64), nullable=False),
        sa.Column("customer_id", sa.String(128), nullable=False),
        sa.Column("customer_name", sa.String(100), nullable=True),
        sa.Column("pharmacy_id", sa.String(64), nullable=True),
        sa.Column("pharmacy_name", sa.String(200), nullable=True),
        sa.Column("last_message", sa.Text(), nullable=True),
        sa.Column("last_message_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_chats_request_id", "chats", ["request_id"], unique=True)
    op.create_index("ix_chats_customer_id", "chats", ["customer_id"])
    op.create_index("ix_chats_pharmacy_id", "chats", ["pharmacy_id"])
    op.create_index("ix_chats_last_message_at", "chats", ["last_message_at"])

    op.create_table(
        "chat_messages",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("chat_id", sa.String(64), sa.ForeignKey("chats.id"), nullable=False),
        sa.Column("sender_id", sa.String(128), nullable=False),
        sa.Column("sender_role", sa.String(16), nullable=False),
        sa.Column("message", sa.Text(), nullable=False, server_default=""),
        sa.Column("type", sa.String(8), nullable=False, server_default="text"),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_chat_messages_chat_id", "chat_messages", ["chat_id"])
    op.create_index("ix_chat_messages_created_at", "chat_messages", ["created_at"])

    op.create_table(
        "notifications",
        sa.Column("id", sa.String(64), primary_key=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("title", sa.String(200), nullable=False),
        sa.Column("message", sa.Text(), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("related_id", sa.String(64), nullable=True),
        sa.Column("is_read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index("ix_notifications_user_id", "notifications", ["user_id"])

    op.create_table(
        "device_tokens",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.String(128), nullable=False),
        sa.Column("token", sa.String(512), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("user_id", "token", name="uq_device_tokens_user_token"),
    )
    op.create_index("ix_device_tokens_user_id", "device_tokens", ["user_id"])


def downgrade() -> None:
    op.drop_table("device_tokens")
    op.drop_table("notifications")
    op.drop_table("chat_messages")
    op.drop_table("chats")
    op.drop_table("medication_requests")
    op.drop_table("pharmacies")
    op.drop_table("users")
