from mollie_components.constants import AVAILABLE_LOCALES, DEFAULT_LOCALE
from mollie_components.schemas import SalesChannelContext


def get_locale(context: SalesChannelContext) -> str:
    """
    Get the locale for Mollie Components.

    Uses the locale of the sales channel's language when Mollie supports it,
    otherwise falls back to en_US.
    """
    locale = ""

    if context.sales_channel is not None and context.sales_channel.locale_code:
        locale = context.sales_channel.locale_code

    if locale not in AVAILABLE_LOCALES:
        locale = DEFAULT_LOCALE

    return locale
