"""Domain models - pure Python dataclasses representing funding sources and fees"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class BankAccountType(str, Enum):
    """Bank account types reported by storage"""

    BUSINESS = "BUSINESS"
    PERSONAL = "PERSONAL"
    WALLET = "WALLET"  # Internal wallet balance, never listed as a payment method


class PaymentMethodType(str, Enum):
    """Discriminator for formatted payment methods"""

    BANK_ACCOUNT = "bankAccount"
    DEBIT_CARD = "debitCard"
    PAYPAL = "payPalMe"


class PendingAction(str, Enum):
    """Offline action still waiting to be synced for a record"""

    ADD = "add"
    DELETE = "delete"
    UPDATE = "update"


class TransferMethodType(str, Enum):
    """Speed used to move funds out of the wallet balance"""

    INSTANT = "instant"
    ACH = "ach"


@dataclass
class AdditionalData:
    """Nested bank/card metadata"""

    bank_name: str = ""
    is_p2p_debit_card: bool = False


@dataclass
class AccountData:
    """Account details shared by bank accounts and cards"""

    bank: str = ""
    account_number: str = ""
    address_name: str = ""
    additional_data: AdditionalData = field(default_factory=AdditionalData)


@dataclass
class BankAccountRecord:
    """Confirmed bank account linked to the user"""

    method_id: Optional[int] = None  # None when storage has no ID
    title: str = ""
    description: str = ""
    type: Optional[BankAccountType] = None
    is_default: bool = False
    is_default_credit: bool = False  # Validated and used to receive funds by default
    account_data: AccountData = field(default_factory=AccountData)
    errors: Dict[str, str] = field(default_factory=dict)
    pending_action: Optional[PendingAction] = None


@dataclass
class CardRecord:
    """Payment card linked to the user"""

    method_id: Optional[int] = None
    title: str = ""
    description: str = ""
    is_default: bool = False
    account_data: AccountData = field(default_factory=AccountData)
    errors: Dict[str, str] = field(default_factory=dict)
    pending_action: Optional[PendingAction] = None


@dataclass
class PendingBankAccount:
    """Bank account selected during the linking flow, not yet confirmed"""

    account_number: str = ""
    address_name: str = ""
    type: Optional[BankAccountType] = None
    additional_data: AdditionalData = field(default_factory=AdditionalData)
    pending_action: Optional[PendingAction] = None


@dataclass
class PersonalBankAccountState:
    """Progress of the personal bank account linking flow"""

    selected_bank_account: Optional[PendingBankAccount] = None
    errors: Dict[str, str] = field(default_factory=dict)  # Keyed by arbitrary (e.g. timestamp) keys


@dataclass
class PayPalMeAlias:
    """PayPal.me handle used for peer-to-peer payments"""

    username: str = ""
    title: str = ""
    description: str = ""
    is_default: bool = False

    def is_empty(self) -> bool:
        return not (self.username or self.title or self.description)


@dataclass
class IconDescriptor:
    """Opaque icon handle and size token returned by the icon resolver"""

    icon: str
    icon_size: Optional[str] = None


@dataclass
class PaymentMethod:
    """Display-ready payment method, uniform across all funding sources"""

    account_type: PaymentMethodType
    key: str
    method_id: Optional[int]  # 0 only for the pending bank account, None when there is no ID
    title: str
    description: str
    icon: Any
    icon_size: Optional[Any] = None
    is_default: bool = False
    is_pending: bool = False
    errors: List[str] = field(default_factory=list)
    pending_action: Optional[PendingAction] = None
    account_data: Optional[AccountData] = None
    type: Optional[BankAccountType] = None  # Bank accounts only
    is_default_credit: bool = False


@dataclass(frozen=True)
class FeeTier:
    """Transfer fee structure: percentage rate (0-100) with a floor in cents"""

    rate: float
    minimum_fee: int


@dataclass(frozen=True)
class FeeSchedule:
    """Fee tiers for each transfer speed"""

    instant: FeeTier
    ach: FeeTier

    def tier_for(self, method_type: TransferMethodType) -> FeeTier:
        return self.instant if method_type == TransferMethodType.INSTANT else self.ach


DEFAULT_FEE_SCHEDULE = FeeSchedule(
    instant=FeeTier(rate=1.5, minimum_fee=25),
    ach=FeeTier(rate=0, minimum_fee=0),
)
