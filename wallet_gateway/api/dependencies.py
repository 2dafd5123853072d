"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from wallet_gateway.config import settings
from wallet_gateway.domain.models import FeeSchedule
from wallet_gateway.domain.payment_methods import PaymentMethodAggregator
from wallet_gateway.infrastructure.icons import BankIconResolver
from wallet_gateway.infrastructure.localization import Translator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_payment_method_aggregator() -> PaymentMethodAggregator:
    """Provide aggregator wired with icon and localization lookups"""
    return PaymentMethodAggregator(BankIconResolver(), Translator(settings.locale))


def get_fee_schedule() -> FeeSchedule:
    """Provide configured transfer fee tiers"""
    return settings.fee_schedule()
