from collections.abc import AsyncGenerator
from typing import Annotated

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from mollie_components.config import Settings, get_settings
from mollie_components.database import get_engine, make_session
from mollie_components.models import SalesChannel
from mollie_components.mollie.client import MollieApiClient
from mollie_components.schemas import MollieSettingStruct, SalesChannelContext
from mollie_components.services.customer import CustomerService
from mollie_components.services.settings import SettingsService


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    FastAPI dependency for getting database session.

    Yields:
        AsyncSession: Database session
    """
    async with make_session(get_engine()) as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise


async def get_sales_channel_context(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_settings)],
    x_sales_channel_id: Annotated[str | None, Header()] = None,
) -> SalesChannelContext:
    """
    Resolve the sales channel of the current request.

    The X-Sales-Channel-Id header wins over the configured default. Without
    either, the request runs without a sales channel.
    """
    channel_id = x_sales_channel_id or settings.default_sales_channel_id
    if not channel_id:
        return SalesChannelContext()

    sales_channel = await SalesChannel.get_by_id(db, channel_id)
    if sales_channel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Sales channel {channel_id} not found",
        )

    return SalesChannelContext(sales_channel=sales_channel)


def get_settings_service(db: Annotated[AsyncSession, Depends(get_db)]) -> SettingsService:
    return SettingsService(db)


def get_customer_service(db: Annotated[AsyncSession, Depends(get_db)]) -> CustomerService:
    return CustomerService(db)


async def get_plugin_settings(
    context: Annotated[SalesChannelContext, Depends(get_sales_channel_context)],
    settings_service: Annotated[SettingsService, Depends(get_settings_service)],
) -> MollieSettingStruct:
    return await settings_service.get_settings(context.sales_channel_id)


async def get_mollie_client(
    plugin_settings: Annotated[MollieSettingStruct, Depends(get_plugin_settings)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> AsyncGenerator[MollieApiClient, None]:
    """Mollie API client authenticated with the key matching the channel's mode."""
    async with MollieApiClient(
        api_key=plugin_settings.api_key,
        base_url=settings.mollie_api_base_url,
        timeout=settings.mollie_timeout_seconds,
    ) as client:
        yield client
