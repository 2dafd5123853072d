"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, Dict, List, Optional, Union

from wallet_gateway.domain.models import (
    BankAccountType,
    PaymentMethod,
    PaymentMethodType,
    PendingAction,
    TransferMethodType,
)


class CamelModel(BaseModel):
    """Base schema speaking camelCase on the wire"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class PaymentMethodsRequest(CamelModel):
    """
    Request body for POST /v1/payment-methods.

    Records are raw storage snapshots; missing fields degrade to defaults.
    Lists may be arrays or objects keyed by ID.
    """

    bank_account_list: Union[List[Dict[str, Any]], Dict[str, Dict[str, Any]]] = Field(default_factory=list)
    card_list: Union[List[Dict[str, Any]], Dict[str, Dict[str, Any]]] = Field(default_factory=list)
    pay_pal_me_data: Optional[Dict[str, Any]] = None
    personal_bank_account: Optional[Dict[str, Any]] = None


class AccountDataSchema(CamelModel):
    """Account details carried through to the client"""

    bank: str = ""
    account_number: str = ""
    address_name: str = ""
    bank_name: str = ""
    is_p2p_debit_card: bool = False


class PaymentMethodSchema(CamelModel):
    """Single formatted payment method"""

    account_type: PaymentMethodType
    key: str
    method_id: Optional[int] = Field(None, alias="methodID")
    title: str
    description: str
    icon: str
    icon_size: Optional[str] = None
    is_default: bool
    is_pending: bool
    errors: List[str]
    pending_action: Optional[PendingAction] = None
    account_data: Optional[AccountDataSchema] = None
    type: Optional[BankAccountType] = None
    is_default_credit: bool = False

    @classmethod
    def from_domain(cls, payment_method: PaymentMethod) -> "PaymentMethodSchema":
        account_data = None
        if payment_method.account_data is not None:
            account_data = AccountDataSchema(
                bank=payment_method.account_data.bank,
                account_number=payment_method.account_data.account_number,
                address_name=payment_method.account_data.address_name,
                bank_name=payment_method.account_data.additional_data.bank_name,
                is_p2p_debit_card=payment_method.account_data.additional_data.is_p2p_debit_card,
            )
        return cls(
            account_type=payment_method.account_type,
            key=payment_method.key,
            method_id=payment_method.method_id,
            title=payment_method.title,
            description=payment_method.description,
            icon=payment_method.icon,
            icon_size=payment_method.icon_size,
            is_default=payment_method.is_default,
            is_pending=payment_method.is_pending,
            errors=payment_method.errors,
            pending_action=payment_method.pending_action,
            account_data=account_data,
            type=payment_method.type,
            is_default_credit=payment_method.is_default_credit,
        )


class PaymentMethodsResponse(CamelModel):
    """Response for POST /v1/payment-methods"""

    payment_methods: List[PaymentMethodSchema]
    has_expensify_payment_method: bool


class EligibilityResponse(CamelModel):
    """Response for POST /v1/payment-methods/eligibility"""

    has_expensify_payment_method: bool


class TransferFeeRequest(CamelModel):
    """Request body for POST /v1/transfer-fee"""

    current_balance: int = Field(..., ge=0, description="Wallet balance in cents")
    method_type: TransferMethodType = Field(..., description="Transfer speed: instant or ach")


class TransferFeeResponse(CamelModel):
    """Response for POST /v1/transfer-fee"""

    fee: int
    current_balance: int
    method_type: TransferMethodType
    rate: float
    minimum_fee: int
    amount_after_fee: int


class FeeTierSchema(CamelModel):
    """Single transfer fee tier"""

    method_type: TransferMethodType
    rate: float
    minimum_fee: int


class FeeTiersResponse(CamelModel):
    """Response for GET /v1/transfer-fee/tiers"""

    tiers: List[FeeTierSchema]
