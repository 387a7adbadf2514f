# Locales supported by Mollie Components
AVAILABLE_LOCALES = (
    "en_US",
    "nl_NL",
    "fr_FR",
    "it_IT",
    "de_DE",
    "de_AT",
    "de_CH",
    "es_ES",
    "ca_ES",
    "nb_NO",
    "pt_PT",
    "sv_SE",
    "fi_FI",
    "da_DK",
    "is_IS",
    "hu_HU",
    "pl_PL",
    "lv_LV",
    "lt_LT",
)

DEFAULT_LOCALE = "en_US"

# Component asset files, relative to resources/assets
COMPONENT_ASSETS = {
    "creditcard": {
        "js": "js/components.creditcard.js",
        "css": "css/components.creditcard.css",
    },
}

# Placeholders replaced in the component scripts
PROFILE_ID_PLACEHOLDER = "[mollie_profile_id]"
SHOP_URL_PLACEHOLDER = "[shop_url]"
LOCALE_PLACEHOLDER = "[mollie_locale]"
TESTMODE_PLACEHOLDER = "[mollie_testmode]"

# Route the shop URL is generated from
HOME_PAGE_ROUTE = "frontend.home.page"

# Where the card token lives in a customer's custom fields
CUSTOM_FIELDS_KEY = "mollie_payments"
CARD_TOKEN_FIELD = "credit_card_token"
