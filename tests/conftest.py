"""Pytest fixtures for testing"""

import pytest
from typing import List, Tuple
from fastapi.testclient import TestClient
from wallet_gateway.api.main import create_app
from wallet_gateway.api.dependencies import get_fee_schedule, get_payment_method_aggregator
from wallet_gateway.domain.models import (
    AccountData,
    AdditionalData,
    BankAccountRecord,
    BankAccountType,
    CardRecord,
    FeeSchedule,
    FeeTier,
    IconDescriptor,
    PayPalMeAlias,
    PendingBankAccount,
    PersonalBankAccountState,
)
from wallet_gateway.domain.payment_methods import PaymentMethodAggregator


class FakeIconResolver:
    """Deterministic icon resolver that remembers every lookup"""

    def __init__(self):
        self.calls: List[Tuple[str, bool]] = []

    def __call__(self, bank_name: str = "", is_card: bool = False) -> IconDescriptor:
        self.calls.append((bank_name, is_card))
        prefix = "card" if is_card else "bank"
        return IconDescriptor(icon=f"{prefix}:{bank_name or 'generic'}", icon_size="large")


def fake_translator(key: str) -> str:
    return {"paymentMethodList.accountLastFour": "Ending in"}.get(key, key)


@pytest.fixture
def icon_resolver() -> FakeIconResolver:
    return FakeIconResolver()


@pytest.fixture
def translator():
    return fake_translator


@pytest.fixture
def aggregator(icon_resolver: FakeIconResolver, translator) -> PaymentMethodAggregator:
    """Aggregator wired with fake collaborators"""
    return PaymentMethodAggregator(icon_resolver, translator)


@pytest.fixture
def fee_schedule() -> FeeSchedule:
    return FeeSchedule(
        instant=FeeTier(rate=1.5, minimum_fee=25),
        ach=FeeTier(rate=0, minimum_fee=0),
    )


@pytest.fixture
def client(aggregator: PaymentMethodAggregator, fee_schedule: FeeSchedule) -> TestClient:
    """Create FastAPI test client with fake collaborators"""
    app = create_app()
    app.dependency_overrides[get_payment_method_aggregator] = lambda: aggregator
    app.dependency_overrides[get_fee_schedule] = lambda: fee_schedule
    return TestClient(app)


@pytest.fixture
def checking_account() -> BankAccountRecord:
    return BankAccountRecord(
        method_id=1001,
        title="Chase Checking",
        description="Account ending in 6789",
        type=BankAccountType.PERSONAL,
        is_default=True,
        is_default_credit=True,
        account_data=AccountData(
            account_number="XXXXXX6789",
            additional_data=AdditionalData(bank_name="Chase"),
        ),
        errors={"200": "Could not verify", "100": "Plaid login expired"},
    )


@pytest.fixture
def wallet_account() -> BankAccountRecord:
    return BankAccountRecord(
        method_id=1002,
        title="Expensify Wallet",
        type=BankAccountType.WALLET,
        is_default_credit=True,
    )


@pytest.fixture
def debit_card() -> CardRecord:
    return CardRecord(
        method_id=2001,
        title="Visa Debit",
        description="Card ending in 4242",
        account_data=AccountData(
            bank="Wells Fargo",
            additional_data=AdditionalData(is_p2p_debit_card=True),
        ),
    )


@pytest.fixture
def paypal_me_alias() -> PayPalMeAlias:
    return PayPalMeAlias(username="janedoe", title="janedoe", description="paypal.me/janedoe")


@pytest.fixture
def personal_bank_account() -> PersonalBankAccountState:
    return PersonalBankAccountState(
        selected_bank_account=PendingBankAccount(
            account_number="000123456789",
            address_name="Jane Doe",
            additional_data=AdditionalData(bank_name="Capital One"),
        ),
        errors={"2": "b", "1": "a"},
    )
