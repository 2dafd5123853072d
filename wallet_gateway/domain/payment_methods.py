"""Payment method aggregation - merges every funding source into one display list"""

import copy
import logging
from typing import Callable, Dict, List, Optional, Sequence, Set
from wallet_gateway.domain.exceptions import InvalidPaymentMethodDataError
from wallet_gateway.domain.models import (
    AccountData,
    BankAccountRecord,
    BankAccountType,
    CardRecord,
    IconDescriptor,
    PaymentMethod,
    PaymentMethodType,
    PayPalMeAlias,
    PendingBankAccount,
    PersonalBankAccountState,
)

logger = logging.getLogger(__name__)

IconResolver = Callable[..., IconDescriptor]  # (bank_name, is_card=False) -> IconDescriptor
Translator = Callable[[str], str]

PAYPAL_ICON = "PayPal"
PENDING_BANK_ACCOUNT_ID = 0
PENDING_BANK_ACCOUNT_KEY = "bankAccount-0"
PAYPAL_ME_KEY = "payPalMe"
ACCOUNT_LAST_FOUR_LABEL = "paymentMethodList.accountLastFour"


def _unique_key(prefix: str, method_id: Optional[int], position: int, used_keys: Set[str]) -> str:
    """
    Key from the storage ID, falling back to the record's position in its list.

    Position keys cover records without an ID (or with the reserved ID 0) and
    duplicate IDs, so keys stay unique within one listing.
    """
    key = f"{prefix}-{method_id}" if method_id else f"{prefix}-position-{position}"
    if key in used_keys:
        key = f"{prefix}-position-{position}"
    used_keys.add(key)
    return key


def sort_errors_by_key(errors: Dict[str, str]) -> List[str]:
    """
    Flatten an error mapping into messages ordered by key.

    Keys are compared as strings (lexicographic), so "10" sorts before "2".
    Timestamp keys of equal length therefore sort chronologically.
    """
    return [errors[key] for key in sorted(errors, key=str)]


class PaymentMethodAggregator:
    """Builds the ordered payment method list shown to the user"""

    def __init__(self, icon_resolver: IconResolver, translator: Translator):
        self.icon_resolver = icon_resolver
        self.translator = translator

    def format_payment_methods(
        self,
        bank_accounts: Optional[Sequence[BankAccountRecord]],
        cards: Optional[Sequence[CardRecord]],
        paypal_me_alias: Optional[PayPalMeAlias] = None,
        personal_bank_account: Optional[PersonalBankAccountState] = None,
    ) -> List[PaymentMethod]:
        """
        Merge all funding sources into a single list.

        Order: pending bank account, bank accounts (wallet excluded), cards,
        PayPal.me alias. Inputs are never modified.

        Raises:
            InvalidPaymentMethodDataError: Pending bank account has no account number
        """
        payment_methods: List[PaymentMethod] = []
        used_keys = {PENDING_BANK_ACCOUNT_KEY}

        pending_bank_account = personal_bank_account.selected_bank_account if personal_bank_account else None
        if pending_bank_account is not None:
            payment_methods.append(
                self._format_pending_bank_account(pending_bank_account, personal_bank_account.errors)
            )

        for position, bank_account in enumerate(bank_accounts or []):
            # The wallet itself is a bank account record but not a way to pay
            if bank_account.type == BankAccountType.WALLET:
                continue
            key = _unique_key("bankAccount", bank_account.method_id, position, used_keys)
            payment_methods.append(self._format_bank_account(bank_account, key))

        for position, card in enumerate(cards or []):
            key = _unique_key("card", card.method_id, position, used_keys)
            payment_methods.append(self._format_card(card, key))

        if paypal_me_alias is not None and not paypal_me_alias.is_empty():
            payment_methods.append(self._format_paypal_me(paypal_me_alias))

        logger.debug("Formatted %d payment methods", len(payment_methods))
        return payment_methods

    def _format_pending_bank_account(
        self,
        pending_bank_account: PendingBankAccount,
        errors: Dict[str, str],
    ) -> PaymentMethod:
        if not pending_bank_account.account_number:
            raise InvalidPaymentMethodDataError("Pending bank account has no account number")

        descriptor = self.icon_resolver(pending_bank_account.additional_data.bank_name or "")
        last_four = pending_bank_account.account_number[-4:]

        return PaymentMethod(
            account_type=PaymentMethodType.BANK_ACCOUNT,
            key=PENDING_BANK_ACCOUNT_KEY,
            method_id=PENDING_BANK_ACCOUNT_ID,
            title=pending_bank_account.address_name,
            description=f"{self.translator(ACCOUNT_LAST_FOUR_LABEL)} {last_four}",
            icon=descriptor.icon,
            icon_size=descriptor.icon_size,
            is_default=False,
            is_pending=True,
            errors=sort_errors_by_key(errors),
            pending_action=pending_bank_account.pending_action,
            account_data=AccountData(
                account_number=pending_bank_account.account_number,
                address_name=pending_bank_account.address_name,
                additional_data=copy.deepcopy(pending_bank_account.additional_data),
            ),
            type=pending_bank_account.type,
        )

    def _format_bank_account(self, bank_account: BankAccountRecord, key: str) -> PaymentMethod:
        descriptor = self.icon_resolver(bank_account.account_data.additional_data.bank_name or "")

        return PaymentMethod(
            account_type=PaymentMethodType.BANK_ACCOUNT,
            key=key,
            method_id=bank_account.method_id or None,
            title=bank_account.title,
            description=bank_account.description,
            icon=descriptor.icon,
            icon_size=descriptor.icon_size,
            is_default=bank_account.is_default,
            errors=list(bank_account.errors.values()),
            pending_action=bank_account.pending_action,
            account_data=copy.deepcopy(bank_account.account_data),
            type=bank_account.type,
            is_default_credit=bank_account.is_default_credit,
        )

    def _format_card(self, card: CardRecord, key: str) -> PaymentMethod:
        descriptor = self.icon_resolver(card.account_data.bank or "", True)

        return PaymentMethod(
            account_type=PaymentMethodType.DEBIT_CARD,
            key=key,
            method_id=card.method_id or None,
            title=card.title,
            description=card.description,
            icon=descriptor.icon,
            icon_size=descriptor.icon_size,
            is_default=card.is_default,
            errors=list(card.errors.values()),
            pending_action=card.pending_action,
            account_data=copy.deepcopy(card.account_data),
        )

    def _format_paypal_me(self, paypal_me_alias: PayPalMeAlias) -> PaymentMethod:
        return PaymentMethod(
            account_type=PaymentMethodType.PAYPAL,
            key=PAYPAL_ME_KEY,
            method_id=None,
            title=paypal_me_alias.title or paypal_me_alias.username,
            description=paypal_me_alias.description,
            icon=PAYPAL_ICON,
            is_default=paypal_me_alias.is_default,
        )


def format_payment_methods(
    bank_accounts: Optional[Sequence[BankAccountRecord]],
    cards: Optional[Sequence[CardRecord]],
    paypal_me_alias: Optional[PayPalMeAlias] = None,
    personal_bank_account: Optional[PersonalBankAccountState] = None,
    *,
    icon_resolver: IconResolver,
    translator: Translator,
) -> List[PaymentMethod]:
    """Functional shortcut around PaymentMethodAggregator"""
    aggregator = PaymentMethodAggregator(icon_resolver, translator)
    return aggregator.format_payment_methods(bank_accounts, cards, paypal_me_alias, personal_bank_account)
