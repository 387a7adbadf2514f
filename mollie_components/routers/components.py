import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from fastapi.responses import JSONResponse

from mollie_components.constants import (
    HOME_PAGE_ROUTE,
    LOCALE_PLACEHOLDER,
    PROFILE_ID_PLACEHOLDER,
    SHOP_URL_PLACEHOLDER,
    TESTMODE_PLACEHOLDER,
)
from mollie_components.dependencies import (
    get_customer_service,
    get_mollie_client,
    get_plugin_settings,
    get_sales_channel_context,
)
from mollie_components.mollie.client import MollieApiClient
from mollie_components.mollie.profiles import lookup_profile_id
from mollie_components.schemas import (
    MollieSettingStruct,
    SalesChannelContext,
    StoreCardTokenResponse,
)
from mollie_components.services.assets import (
    AssetNotFoundError,
    read_component_asset,
    render_template,
    strip_trailing_slash,
)
from mollie_components.services.customer import CustomerService
from mollie_components.services.locale import get_locale

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mollie/components", tags=["mollie components"])


def _read_asset_or_404(component_type: str, kind: str) -> str:
    try:
        return read_component_asset(component_type, kind)
    except AssetNotFoundError as e:
        logger.info(f"Unknown component asset requested {component_type = }, {kind = }")
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e)) from e


@router.get(
    "/store-card-token/{customer_id}/{card_token}",
    name="frontend.mollie.components.storeCardToken",
)
async def store_card_token(
    customer_id: str,
    card_token: str,
    customer_service: Annotated[CustomerService, Depends(get_customer_service)],
) -> Response:
    """
    Store a card token created by Mollie Components for a customer.

    Always answers 200; an unknown customer yields success=false and a null result.
    """
    result = None

    customer = await customer_service.get_customer(customer_id)

    if customer is not None:
        result = await customer_service.set_card_token(customer, card_token)
    else:
        logger.info(f"Card token not stored, unknown customer {customer_id = }")

    body = StoreCardTokenResponse(
        success=result is not None and result.success,
        customer_id=customer_id,
        result=result.errors if result is not None else None,
    )

    return JSONResponse(body.model_dump(by_alias=True), media_type="text/javascript")


@router.get("/js/{component_type}", name="frontend.mollie.components.js")
async def components_js(
    component_type: str,
    request: Request,
    context: Annotated[SalesChannelContext, Depends(get_sales_channel_context)],
    plugin_settings: Annotated[MollieSettingStruct, Depends(get_plugin_settings)],
    mollie_client: Annotated[MollieApiClient, Depends(get_mollie_client)],
) -> Response:
    """Serve the component script with profile, shop URL, locale and test mode filled in."""
    javascript = _read_asset_or_404(component_type, "js")

    profile = await lookup_profile_id(mollie_client)

    shop_url = strip_trailing_slash(str(request.url_for(HOME_PAGE_ROUTE)))

    javascript = render_template(
        javascript,
        {
            PROFILE_ID_PLACEHOLDER: profile.profile_id,
            SHOP_URL_PLACEHOLDER: shop_url,
            LOCALE_PLACEHOLDER: get_locale(context),
            TESTMODE_PLACEHOLDER: "true" if plugin_settings.test_mode else "false",
        },
    )

    return Response(content=javascript, media_type="text/javascript")


@router.get("/css/{component_type}", name="frontend.mollie.components.css")
async def components_css(component_type: str) -> Response:
    stylesheet = _read_asset_or_404(component_type, "css")

    return Response(content=stylesheet, media_type="text/css")
