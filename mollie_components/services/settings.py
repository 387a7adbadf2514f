import uuid
from typing import Optional

from sqlalchemy.ext.asyncio import AsyncSession

from mollie_components.models import PluginSetting
from mollie_components.schemas import MollieSettingStruct

_SETTING_FIELDS = ("test_mode", "live_api_key", "test_api_key")


class SettingsService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_settings(self, sales_channel_id: Optional[uuid.UUID]) -> MollieSettingStruct:
        """
        Resolve the plugin settings for a sales channel.

        Values set on the channel override the global ones; anything set on
        neither keeps the default of MollieSettingStruct.
        """
        values = {}
        for row in await PluginSetting.for_sales_channel(self.session, sales_channel_id):
            for name in _SETTING_FIELDS:
                value = getattr(row, name)
                if value is not None:
                    values[name] = value

        return MollieSettingStruct(**values)
