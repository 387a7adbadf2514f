from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from mollie_components.models import SalesChannel


@dataclass(frozen=True)
class SalesChannelContext:
    """The storefront a request is served for; ``None`` when no channel applies."""

    sales_channel: Optional[SalesChannel] = None

    @property
    def sales_channel_id(self):
        return self.sales_channel.id if self.sales_channel is not None else None


class MollieSettingStruct(BaseModel):
    """Effective Mollie plugin settings for one sales channel."""

    test_mode: bool = False
    live_api_key: str = ""
    test_api_key: str = ""

    @property
    def api_key(self) -> str:
        return self.test_api_key if self.test_mode else self.live_api_key


class Profile(BaseModel):
    """Merchant profile as returned by the Mollie profiles API."""

    id: Optional[str] = None
    mode: Optional[str] = None
    name: Optional[str] = None
    website: Optional[str] = None
    status: Optional[str] = None

    model_config = ConfigDict(extra="ignore")


@dataclass
class CustomerUpdateResult:
    errors: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        return not self.errors


class StoreCardTokenResponse(BaseModel):
    """Payload returned to the storefront after storing a card token."""

    success: bool = Field(..., description="True when the token was stored")
    customer_id: str = Field(..., alias="customerId", description="Customer id from the path")
    result: Optional[list[str]] = Field(
        None, description="Errors of the update, null when no update was attempted"
    )

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "success": True,
                "customerId": "0f8fad5b-d9cb-469f-a165-70867728950e",
                "result": [],
            }
        },
    )
