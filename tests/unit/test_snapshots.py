"""Unit tests for storage snapshot parsing"""

from wallet_gateway.domain.models import BankAccountType, PendingAction
from wallet_gateway.domain.snapshots import (
    parse_bank_account,
    parse_bank_accounts,
    parse_card,
    parse_cards,
    parse_paypal_me,
    parse_personal_bank_account,
)
from wallet_gateway.utils.lookup import get_bool, get_int, get_path, get_str


def test_get_path_defaults():
    """Test missing, None and non-mapping segments fall back to default"""
    data = {"accountData": {"additionalData": {"bankName": "Chase", "empty": None}, "bank": "str"}}

    assert get_path(data, "accountData.additionalData.bankName") == "Chase"
    assert get_path(data, "accountData.additionalData.missing", "") == ""
    assert get_path(data, "accountData.additionalData.empty", "x") == "x"
    assert get_path(data, "accountData.bank.nested", "x") == "x"
    assert get_path(None, "accountData", {}) == {}


def test_typed_getters():
    """Test typed getters reject values of the wrong type"""
    data = {"flag": "true", "id": "12", "bad_id": "abc", "is_id": True, "name": 5}

    assert get_bool(data, "flag") is False
    assert get_int(data, "id") == 12
    assert get_int(data, "bad_id", 3) == 3
    assert get_int(data, "is_id", 3) == 3
    assert get_str(data, "name") == ""


def test_parse_bank_account():
    """Test bank account snapshot lowering"""
    record = parse_bank_account(
        {
            "methodID": 1001,
            "title": "Chase Checking",
            "description": "Account ending in 6789",
            "isDefault": True,
            "accountData": {
                "type": "PERSONAL",
                "defaultCredit": True,
                "accountNumber": "XXXXXX6789",
                "additionalData": {"bankName": "Chase"},
            },
            "errors": {"1": "Bad routing number"},
            "pendingAction": "update",
        }
    )

    assert record.method_id == 1001
    assert record.type == BankAccountType.PERSONAL
    assert record.is_default is True
    assert record.is_default_credit is True
    assert record.account_data.account_number == "XXXXXX6789"
    assert record.account_data.additional_data.bank_name == "Chase"
    assert record.errors == {"1": "Bad routing number"}
    assert record.pending_action == PendingAction.UPDATE


def test_parse_bank_account_degrades_to_defaults():
    """Test malformed fields never raise"""
    record = parse_bank_account({"type": "MYSTERY", "errors": "oops", "pendingAction": "explode"})

    assert record.method_id is None
    assert record.type is None
    assert record.is_default_credit is False
    assert record.errors == {}
    assert record.pending_action is None
    assert record.account_data.additional_data.bank_name == ""


def test_parse_wallet_type_from_top_level():
    """Test top-level type is honoured when accountData has none"""
    assert parse_bank_account({"methodID": 5, "type": "WALLET"}).type == BankAccountType.WALLET


def test_parse_lists_keyed_by_id():
    """Test lists may arrive as objects keyed by ID, preserving order"""
    raw = {"20": {"methodID": 20}, "10": {"methodID": 10}, "bad": "not-a-record"}

    assert [record.method_id for record in parse_bank_accounts(raw)] == [20, 10]
    assert parse_cards(None) == []


def test_parse_card():
    """Test card snapshot lowering"""
    card = parse_card(
        {
            "methodID": 2001,
            "title": "Visa Debit",
            "accountData": {"bank": "Wells Fargo", "additionalData": {"isP2PDebitCard": True}},
        }
    )

    assert card.method_id == 2001
    assert card.account_data.bank == "Wells Fargo"
    assert card.account_data.additional_data.is_p2p_debit_card is True


def test_parse_paypal_me():
    """Test empty PayPal.me snapshots are treated as absent"""
    assert parse_paypal_me(None) is None
    assert parse_paypal_me({}) is None

    alias = parse_paypal_me({"title": "janedoe", "description": "paypal.me/janedoe"})
    assert alias.username == "janedoe"
    assert alias.description == "paypal.me/janedoe"


def test_parse_personal_bank_account():
    """Test pending account and its errors"""
    state = parse_personal_bank_account(
        {
            "selectedBankAccount": {
                "accountNumber": "000123456789",
                "addressName": "Jane Doe",
                "additionalData": {"bankName": "Capital One"},
            },
            "errors": {"1650000000002": "b", "1650000000001": "a"},
        }
    )

    assert state.selected_bank_account.account_number == "000123456789"
    assert state.selected_bank_account.additional_data.bank_name == "Capital One"
    assert state.errors == {"1650000000002": "b", "1650000000001": "a"}


def test_parse_personal_bank_account_empty_selection():
    """Test empty selection means no pending account"""
    assert parse_personal_bank_account(None) is None
    assert parse_personal_bank_account({"selectedBankAccount": {}}).selected_bank_account is None


def test_parse_method_id_reserved_zero_and_fallbacks():
    """Test 0 and missing IDs become None, fallback ID fields are honoured"""
    assert parse_bank_account({"methodID": 0}).method_id is None
    assert parse_bank_account({"accountData": {"bankAccountID": "88"}}).method_id == 88
    assert parse_card({"accountData": {"fundID": 9}}).method_id == 9
    assert parse_card({"title": "No ID"}).method_id is None
