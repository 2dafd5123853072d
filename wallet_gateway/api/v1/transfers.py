"""POST /v1/transfer-fee - wallet balance transfer fee quotes"""

from fastapi import APIRouter, Depends, Request

from wallet_gateway.api.v1.schemas import FeeTiersResponse, FeeTierSchema, TransferFeeRequest, TransferFeeResponse
from wallet_gateway.api.dependencies import get_fee_schedule, get_request_id
from wallet_gateway.domain.fees import calculate_wallet_transfer_balance_fee, get_fee_tier
from wallet_gateway.domain.models import FeeSchedule, TransferMethodType
from wallet_gateway.infrastructure.observability.logging import log_fee_quote
from wallet_gateway.infrastructure.observability.metrics import record_fee_quote

router = APIRouter()


@router.post("/transfer-fee", response_model=TransferFeeResponse)
def quote_transfer_fee(
    request_body: TransferFeeRequest,
    request: Request,
    fee_schedule: FeeSchedule = Depends(get_fee_schedule),
):
    """
    Quote the fee for transferring the full wallet balance.

    Returns:
        Fee in cents plus the tier it was computed from
    """
    request_id = get_request_id(request)
    tier = get_fee_tier(request_body.method_type, fee_schedule)
    fee = calculate_wallet_transfer_balance_fee(request_body.current_balance, request_body.method_type, fee_schedule)

    record_fee_quote(request_body.method_type.value, fee)
    log_fee_quote(request_id, request_body.method_type.value, request_body.current_balance, fee)

    return TransferFeeResponse(
        fee=fee,
        current_balance=request_body.current_balance,
        method_type=request_body.method_type,
        rate=tier.rate,
        minimum_fee=tier.minimum_fee,
        amount_after_fee=max(request_body.current_balance - fee, 0),
    )


@router.get("/transfer-fee/tiers", response_model=FeeTiersResponse)
def list_fee_tiers(fee_schedule: FeeSchedule = Depends(get_fee_schedule)):
    """Configured fee tiers for each transfer speed"""
    return FeeTiersResponse(
        tiers=[
            FeeTierSchema(
                method_type=method_type,
                rate=fee_schedule.tier_for(method_type).rate,
                minimum_fee=fee_schedule.tier_for(method_type).minimum_fee,
            )
            for method_type in TransferMethodType
        ]
    )
