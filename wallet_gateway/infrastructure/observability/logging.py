"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = "wallet-gateway"


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_payment_methods_formatted(
    request_id: str,
    method_count: int,
    has_pending_bank_account: bool,
    has_expensify_payment_method: bool,
    duration_ms: float,
) -> None:
    """Log structured aggregation outcome"""
    logging.info(
        "Payment methods formatted",
        extra={
            "request_id": request_id,
            "step": "payment_methods_formatted",
            "method_count": method_count,
            "has_pending_bank_account": has_pending_bank_account,
            "has_expensify_payment_method": has_expensify_payment_method,
            "duration_ms": duration_ms,
        },
    )


def log_fee_quote(
    request_id: str,
    method_type: str,
    current_balance_cents: int,
    fee_cents: int,
) -> None:
    """Log structured transfer fee quote"""
    logging.info(
        "Transfer fee quoted",
        extra={
            "request_id": request_id,
            "step": "fee_quoted",
            "method_type": method_type,
            "current_balance_cents": current_balance_cents,
            "fee_cents": fee_cents,
        },
    )
