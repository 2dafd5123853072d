"""Prometheus metrics for payment method listings and transfer fee quotes"""

from typing import Iterable
from prometheus_client import Counter, Histogram
from wallet_gateway.domain.models import PaymentMethod

# Payment method metrics
payment_methods_counter = Counter(
    "wallet_payment_methods_total",
    "Payment methods returned in formatted listings",
    ["account_type"],  # bankAccount | debitCard | payPalMe
)

pending_bank_account_counter = Counter(
    "wallet_pending_bank_account_total",
    "Listings that included a pending bank account",
)

invalid_payment_method_counter = Counter(
    "wallet_invalid_payment_method_total",
    "Listings rejected because of missing required data",
)

# Fee metrics
fee_quote_counter = Counter(
    "wallet_transfer_fee_quotes_total",
    "Transfer fee quotes computed",
    ["method_type"],  # instant | ach
)

fee_cents_histogram = Histogram(
    "wallet_transfer_fee_cents",
    "Quoted transfer fees in cents",
    ["method_type"],
    buckets=[0, 25, 50, 100, 250, 500, 1000, 2500, 5000],
)

# Service health
request_duration_histogram = Histogram(
    "http_request_duration_seconds",
    "HTTP request latency",
    ["method", "endpoint", "status"],
)


def record_payment_methods(payment_methods: Iterable[PaymentMethod]) -> None:
    """Count formatted payment methods by account type"""
    for payment_method in payment_methods:
        payment_methods_counter.labels(account_type=payment_method.account_type.value).inc()
        if payment_method.is_pending:
            pending_bank_account_counter.inc()


def record_fee_quote(method_type: str, fee_cents: int) -> None:
    """Record fee quote metrics for monitoring transfer pricing"""
    fee_quote_counter.labels(method_type=method_type).inc()
    fee_cents_histogram.labels(method_type=method_type).observe(fee_cents)
