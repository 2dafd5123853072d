"""Lower raw storage snapshots (camelCase JSON) into domain records"""

from typing import Any, Dict, List, Mapping, Optional, Type, TypeVar
from enum import Enum
from wallet_gateway.domain.models import (
    AccountData,
    AdditionalData,
    BankAccountRecord,
    BankAccountType,
    CardRecord,
    PayPalMeAlias,
    PendingAction,
    PendingBankAccount,
    PersonalBankAccountState,
)
from wallet_gateway.utils.lookup import get_bool, get_int, get_path, get_str

E = TypeVar("E", bound=Enum)


def _parse_enum(enum_type: Type[E], value: Any) -> Optional[E]:
    """Enum member for value, None when absent or unknown"""
    try:
        return enum_type(value)
    except (ValueError, TypeError):
        return None


def _parse_errors(raw: Any) -> Dict[str, str]:
    """Error mapping with string keys and messages; anything else is treated as no errors"""
    errors = get_path(raw, "errors", {})
    if not isinstance(errors, Mapping):
        return {}
    return {str(key): str(message) for key, message in errors.items() if message is not None}


def _as_records(raw: Any) -> List[Any]:
    """Storage lists arrive either as arrays or as objects keyed by ID"""
    if isinstance(raw, Mapping):
        return list(raw.values())
    if isinstance(raw, list):
        return raw
    return []


def _parse_method_id(raw: Any, fallback_path: str) -> Optional[int]:
    """Storage ID, or None when absent. 0 is reserved for the pending bank account."""
    method_id = get_int(raw, "methodID", None) or get_int(raw, fallback_path, None)
    return method_id or None


def _parse_account_data(raw: Any) -> AccountData:
    return AccountData(
        bank=get_str(raw, "accountData.bank"),
        account_number=get_str(raw, "accountData.accountNumber"),
        address_name=get_str(raw, "accountData.addressName"),
        additional_data=AdditionalData(
            bank_name=get_str(raw, "accountData.additionalData.bankName"),
            is_p2p_debit_card=get_bool(raw, "accountData.additionalData.isP2PDebitCard"),
        ),
    )


def parse_bank_account(raw: Any) -> BankAccountRecord:
    """
    Build a bank account record.

    `type` is read from `accountData.type` with a fallback to a top-level
    `type`; both shapes exist in storage.
    """
    account_type = get_path(raw, "accountData.type") or get_path(raw, "type")
    return BankAccountRecord(
        method_id=_parse_method_id(raw, "accountData.bankAccountID"),
        title=get_str(raw, "title"),
        description=get_str(raw, "description"),
        type=_parse_enum(BankAccountType, account_type),
        is_default=get_bool(raw, "isDefault"),
        is_default_credit=get_bool(raw, "accountData.defaultCredit") or get_bool(raw, "isDefaultCredit"),
        account_data=_parse_account_data(raw),
        errors=_parse_errors(raw),
        pending_action=_parse_enum(PendingAction, get_path(raw, "pendingAction")),
    )


def parse_card(raw: Any) -> CardRecord:
    return CardRecord(
        method_id=_parse_method_id(raw, "accountData.fundID"),
        title=get_str(raw, "title"),
        description=get_str(raw, "description"),
        is_default=get_bool(raw, "isDefault"),
        account_data=_parse_account_data(raw),
        errors=_parse_errors(raw),
        pending_action=_parse_enum(PendingAction, get_path(raw, "pendingAction")),
    )


def parse_bank_accounts(raw: Any) -> List[BankAccountRecord]:
    return [parse_bank_account(item) for item in _as_records(raw) if isinstance(item, Mapping)]


def parse_cards(raw: Any) -> List[CardRecord]:
    return [parse_card(item) for item in _as_records(raw) if isinstance(item, Mapping)]


def parse_paypal_me(raw: Any) -> Optional[PayPalMeAlias]:
    """PayPal.me alias, or None when the snapshot is empty"""
    if not isinstance(raw, Mapping) or not raw:
        return None
    username = get_str(raw, "username") or get_str(raw, "title")
    if not username:
        return None
    return PayPalMeAlias(
        username=username,
        title=get_str(raw, "title", username),
        description=get_str(raw, "description"),
        is_default=get_bool(raw, "isDefault"),
    )


def parse_personal_bank_account(raw: Any) -> Optional[PersonalBankAccountState]:
    """
    Personal bank account linking state.

    An empty or missing `selectedBankAccount` yields a state with no pending
    account; a missing snapshot yields None.
    """
    if not isinstance(raw, Mapping):
        return None

    selected = get_path(raw, "selectedBankAccount", {})
    pending_bank_account = None
    if isinstance(selected, Mapping) and selected:
        pending_bank_account = PendingBankAccount(
            account_number=get_str(selected, "accountNumber"),
            address_name=get_str(selected, "addressName"),
            type=_parse_enum(BankAccountType, get_path(selected, "type")),
            additional_data=AdditionalData(bank_name=get_str(selected, "additionalData.bankName")),
            pending_action=_parse_enum(PendingAction, get_path(selected, "pendingAction")),
        )

    return PersonalBankAccountState(
        selected_bank_account=pending_bank_account,
        errors=_parse_errors(raw),
    )
