"""Display strings used when formatting payment methods"""

from typing import Dict

DEFAULT_LOCALE = "en"

TRANSLATIONS: Dict[str, Dict[str, str]] = {
    "en": {
        "paymentMethodList.accountLastFour": "Ending in",
    },
    "es": {
        "paymentMethodList.accountLastFour": "Terminada en",
    },
}


class Translator:
    """Look up a display string for the configured locale"""

    def __init__(self, locale: str = DEFAULT_LOCALE):
        self.locale = locale if locale in TRANSLATIONS else DEFAULT_LOCALE

    def __call__(self, key: str) -> str:
        # Missing translations fall back to English, then to the key itself
        return TRANSLATIONS[self.locale].get(key) or TRANSLATIONS[DEFAULT_LOCALE].get(key, key)
