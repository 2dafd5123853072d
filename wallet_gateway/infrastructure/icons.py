"""Bank and card icon lookup"""

from typing import Dict, Optional
from wallet_gateway.domain.models import IconDescriptor

GENERIC_BANK_ICON = "GenericBank"
GENERIC_BANK_CARD_ICON = "GenericBankCard"
CREDIT_CARD_ICON = "CreditCard"
ICON_SIZE_EXTRA_LARGE = "iconSizeExtraLarge"

# Lowercase bank-name prefix -> icon handle
BANK_ICONS: Dict[str, str] = {
    "american express": "AmericanExpress",
    "bank of america": "BankOfAmerica",
    "bbva compass": "Bbva",
    "capital one": "CapitalOne",
    "chase": "Chase",
    "charles schwab": "CharlesSchwab",
    "citibank": "CitiBank",
    "citizens bank": "CitizensBank",
    "discover": "Discover",
    "fidelity": "Fidelity",
    "huntington bank": "HuntingtonBank",
    "navy federal credit union": "NavyFederal",
    "pnc": "PNC",
    "regions bank": "RegionsBank",
    "suntrust": "SunTrust",
    "td bank": "TdBank",
    "us bank": "USBank",
    "usaa": "USAA",
    "wells fargo": "WellsFargo",
}


class BankIconResolver:
    """
    Resolve the icon shown next to a bank account or card.

    Unknown or empty bank names fall back to the generic bank icon, or the
    plain credit card icon for card lookups. The plain credit card icon keeps
    its natural size; every other icon is drawn extra large.
    """

    def __init__(self, icons: Optional[Dict[str, str]] = None):
        self.icons = icons if icons is not None else BANK_ICONS

    def __call__(self, bank_name: str = "", is_card: bool = False) -> IconDescriptor:
        icon = GENERIC_BANK_CARD_ICON if is_card else GENERIC_BANK_ICON
        if bank_name:
            icon = self._lookup(bank_name.lower(), is_card)

        icon_size = None if icon == CREDIT_CARD_ICON else ICON_SIZE_EXTRA_LARGE
        return IconDescriptor(icon=icon, icon_size=icon_size)

    def _lookup(self, bank_name: str, is_card: bool) -> str:
        for prefix, icon in self.icons.items():
            if bank_name.startswith(prefix):
                return icon
        return CREDIT_CARD_ICON if is_card else GENERIC_BANK_ICON
