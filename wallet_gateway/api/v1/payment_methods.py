"""POST /v1/payment-methods - formatted payment method list and eligibility"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from wallet_gateway.api.v1.schemas import (
    EligibilityResponse,
    PaymentMethodSchema,
    PaymentMethodsRequest,
    PaymentMethodsResponse,
)
from wallet_gateway.api.dependencies import get_payment_method_aggregator, get_request_id
from wallet_gateway.domain.eligibility import has_expensify_payment_method
from wallet_gateway.domain.exceptions import InvalidPaymentMethodDataError
from wallet_gateway.domain.payment_methods import PaymentMethodAggregator
from wallet_gateway.domain.snapshots import (
    parse_bank_accounts,
    parse_cards,
    parse_paypal_me,
    parse_personal_bank_account,
)
from wallet_gateway.infrastructure.observability.logging import log_payment_methods_formatted
from wallet_gateway.infrastructure.observability.metrics import invalid_payment_method_counter, record_payment_methods

router = APIRouter()


@router.post("/payment-methods", response_model=PaymentMethodsResponse)
def list_payment_methods(
    request_body: PaymentMethodsRequest,
    request: Request,
    aggregator: PaymentMethodAggregator = Depends(get_payment_method_aggregator),
):
    """
    Build the display-ready payment method list.

    Flow:
    1. Lower storage snapshots into domain records
    2. Check whether the user can send/receive Expensify payments
    3. Merge pending bank account, bank accounts, cards and PayPal.me
    4. Record metrics and logs
    """
    start_time = time.time()
    request_id = get_request_id(request)

    bank_accounts = parse_bank_accounts(request_body.bank_account_list)
    cards = parse_cards(request_body.card_list)
    paypal_me_alias = parse_paypal_me(request_body.pay_pal_me_data)
    personal_bank_account = parse_personal_bank_account(request_body.personal_bank_account)

    is_eligible = has_expensify_payment_method(cards, bank_accounts)

    try:
        payment_methods = aggregator.format_payment_methods(
            bank_accounts, cards, paypal_me_alias, personal_bank_account
        )
    except InvalidPaymentMethodDataError as e:
        invalid_payment_method_counter.inc()
        logging.warning(f"Invalid payment method data: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    duration_ms = (time.time() - start_time) * 1000
    record_payment_methods(payment_methods)
    log_payment_methods_formatted(
        request_id,
        method_count=len(payment_methods),
        has_pending_bank_account=any(method.is_pending for method in payment_methods),
        has_expensify_payment_method=is_eligible,
        duration_ms=duration_ms,
    )

    return PaymentMethodsResponse(
        payment_methods=[PaymentMethodSchema.from_domain(method) for method in payment_methods],
        has_expensify_payment_method=is_eligible,
    )


@router.post("/payment-methods/eligibility", response_model=EligibilityResponse)
def check_eligibility(request_body: PaymentMethodsRequest):
    """Whether the user holds a P2P debit card or a default-credit bank account"""
    bank_accounts = parse_bank_accounts(request_body.bank_account_list)
    cards = parse_cards(request_body.card_list)

    return EligibilityResponse(has_expensify_payment_method=has_expensify_payment_method(cards, bank_accounts))
