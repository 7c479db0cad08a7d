"""Structured JSON logging for billing runs"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger
from carshare_billing.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stderr, stdout may carry the output document
    handler = logging.StreamHandler(sys.stderr)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_rental_billed(rental_id: int, car_id: int, nb_days: int, price: int, drivy_fee: int) -> None:
    """Log structured rental billing outcome"""
    logging.info(
        "Rental billed",
        extra={
            "rental_id": rental_id,
            "car_id": car_id,
            "step": "rental_billed",
            "nb_days": nb_days,
            "price_cents": price,
            "drivy_fee_cents": drivy_fee,
        },
    )


def log_modification_billed(modification_id: int, rental_id: int, driver_delta: int) -> None:
    """Log structured modification billing outcome"""
    logging.info(
        "Rental modification billed",
        extra={
            "modification_id": modification_id,
            "rental_id": rental_id,
            "step": "modification_billed",
            "driver_delta_cents": driver_delta,
        },
    )
