"""Wallet transfer fee calculation"""

from decimal import Decimal, ROUND_CEILING
from typing import Optional
from wallet_gateway.domain.models import DEFAULT_FEE_SCHEDULE, FeeSchedule, FeeTier, TransferMethodType


def get_fee_tier(method_type: TransferMethodType, fee_schedule: Optional[FeeSchedule] = None) -> FeeTier:
    """INSTANT transfers use the instant tier, everything else the standard (ACH) tier"""
    return (fee_schedule or DEFAULT_FEE_SCHEDULE).tier_for(method_type)


def calculate_wallet_transfer_balance_fee(
    current_balance_cents: int,
    method_type: TransferMethodType,
    fee_schedule: Optional[FeeSchedule] = None,
) -> int:
    """
    Fee in cents for transferring the whole wallet balance out.

    The percentage fee is always rounded up to the next whole cent, then
    floored at the tier's minimum fee.

    Example (instant: 1.5%, min 25 cents):
        1000 cents → ceil(15.0) = 15 → max(15, 25) = 25
        5001 cents → ceil(75.015) = 76
    """
    tier = get_fee_tier(method_type, fee_schedule)

    # Round up to the next whole cent
    percentage_fee = Decimal(current_balance_cents) * Decimal(str(tier.rate)) / Decimal(100)
    fee = int(percentage_fee.to_integral_value(rounding=ROUND_CEILING))

    return max(fee, tier.minimum_fee)
