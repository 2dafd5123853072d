"""Eligibility for Expensify-mediated payments"""

from typing import Optional, Sequence
from wallet_gateway.domain.models import BankAccountRecord, CardRecord


def has_expensify_payment_method(
    cards: Optional[Sequence[CardRecord]] = None,
    bank_accounts: Optional[Sequence[BankAccountRecord]] = None,
) -> bool:
    """
    Check whether the user has either a P2P debit card or a default-credit bank account.

    Billing cards that are not P2P debit cards cannot be made the default
    method, so they do not count.
    """
    has_valid_bank_account = any(account.is_default_credit for account in bank_accounts or [])
    has_valid_debit_card = any(card.account_data.additional_data.is_p2p_debit_card for card in cards or [])

    return has_valid_bank_account or has_valid_debit_card
