"""Unit tests for resolving the Mollie Components locale of a sales channel."""

import pytest

from mollie_components.constants import AVAILABLE_LOCALES, DEFAULT_LOCALE
from mollie_components.models import SalesChannel
from mollie_components.schemas import SalesChannelContext
from mollie_components.services.locale import get_locale


def make_context(locale_code):
    return SalesChannelContext(sales_channel=SalesChannel(name="Storefront", locale_code=locale_code))


@pytest.mark.unit
class TestGetLocale:
    def test_allow_list_has_nineteen_locales(self):
        assert len(AVAILABLE_LOCALES) == 19
        assert DEFAULT_LOCALE == "en_US"

    @pytest.mark.parametrize("locale_code", AVAILABLE_LOCALES)
    def test_supported_locale_is_kept(self, locale_code):
        assert get_locale(make_context(locale_code)) == locale_code

    @pytest.mark.parametrize(
        "locale_code",
        [
            None,
            "",
            "en_GB",  # Not supported by Mollie Components
            "de-DE",  # Hyphenated form is not in the allow-list
            "EN_US",
            "nl",
        ],
    )
    def test_unsupported_locale_falls_back(self, locale_code):
        assert get_locale(make_context(locale_code)) == "en_US"

    def test_context_without_sales_channel_falls_back(self):
        assert get_locale(SalesChannelContext()) == "en_US"
