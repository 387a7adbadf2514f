import uuid
from datetime import datetime
from typing import Self

from sqlalchemy import JSON, TIMESTAMP, Boolean, ForeignKey, String, Uuid, select
from sqlalchemy.ext.asyncio import AsyncAttrs, AsyncSession
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(AsyncAttrs, DeclarativeBase):
    pass


def _parse_uuid(value: uuid.UUID | str) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(value)
    except ValueError:
        return None


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        nullable=False,
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )


class SalesChannel(TimestampMixin, Base):
    """A storefront the plugin serves, with the locale its language uses."""

    __tablename__ = "sales_channels"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(String, nullable=False)
    locale_code: Mapped[str | None] = mapped_column(String(16), nullable=True)

    @classmethod
    async def get_by_id(cls, session: AsyncSession, channel_id: uuid.UUID | str) -> Self | None:
        parsed = _parse_uuid(channel_id)
        if parsed is None:
            return None
        return await session.get(cls, parsed)


class PluginSetting(TimestampMixin, Base):
    """
    Mollie plugin configuration.

    The row without a sales channel holds the global values. A row bound to a
    sales channel overrides every global value it sets (non-null columns).
    """

    __tablename__ = "plugin_settings"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    sales_channel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("sales_channels.id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )
    test_mode: Mapped[bool | None] = mapped_column(Boolean, nullable=True)
    live_api_key: Mapped[str | None] = mapped_column(String, nullable=True)
    test_api_key: Mapped[str | None] = mapped_column(String, nullable=True)

    @classmethod
    async def for_sales_channel(
        cls, session: AsyncSession, channel_id: uuid.UUID | None
    ) -> list[Self]:
        """Return the global row and, if any, the channel row (global first)."""
        condition = cls.sales_channel_id.is_(None)
        if channel_id is not None:
            condition = condition | (cls.sales_channel_id == channel_id)

        result = await session.execute(select(cls).where(condition))
        return sorted(result.scalars().all(), key=lambda row: row.sales_channel_id is not None)


class Customer(TimestampMixin, Base):
    __tablename__ = "customers"

    id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
    )
    sales_channel_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("sales_channels.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    email: Mapped[str] = mapped_column(String, nullable=False, index=True)
    first_name: Mapped[str | None] = mapped_column(String, nullable=True)
    last_name: Mapped[str | None] = mapped_column(String, nullable=True)
    custom_fields: Mapped[dict | None] = mapped_column(JSON, nullable=True)

    @classmethod
    async def get_by_id(cls, session: AsyncSession, customer_id: uuid.UUID | str) -> Self | None:
        parsed = _parse_uuid(customer_id)
        if parsed is None:
            return None
        return await session.get(cls, parsed)
