"""Unit tests for Expensify payment method eligibility"""

from wallet_gateway.domain.eligibility import has_expensify_payment_method
from wallet_gateway.domain.models import AccountData, AdditionalData, BankAccountRecord, CardRecord


def test_no_payment_methods():
    """Test empty and missing inputs are not eligible"""
    assert has_expensify_payment_method([], []) is False
    assert has_expensify_payment_method() is False
    assert has_expensify_payment_method(None, None) is False


def test_default_credit_bank_account_among_ineligible():
    """Test one default-credit account is enough"""
    bank_accounts = [
        BankAccountRecord(method_id=1, is_default=True),
        BankAccountRecord(method_id=2, is_default_credit=True),
    ]
    assert has_expensify_payment_method([], bank_accounts) is True


def test_p2p_debit_card():
    """Test P2P debit cards make the user eligible"""
    cards = [
        CardRecord(method_id=1),
        CardRecord(method_id=2, account_data=AccountData(additional_data=AdditionalData(is_p2p_debit_card=True))),
    ]
    assert has_expensify_payment_method(cards, []) is True


def test_billing_cards_and_unvalidated_accounts_not_eligible():
    """Test other card/account fields do not matter"""
    cards = [CardRecord(method_id=1, is_default=True, account_data=AccountData(bank="Chase"))]
    bank_accounts = [BankAccountRecord(method_id=2, is_default=True, title="Checking")]

    assert has_expensify_payment_method(cards, bank_accounts) is False
