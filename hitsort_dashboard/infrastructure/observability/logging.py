"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from hitsort_dashboard.config import settings
from hitsort_dashboard.domain.models import Dashboard


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

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_dashboard_built(request_id: str, dashboard: Dashboard, duration_ms: float) -> None:
    """Log structured summary of a dashboard build"""
    logging.info(
        "Dashboard built",
        extra={
            "request_id": request_id,
            "step": "dashboard_complete",
            "total_cards": dashboard.stats.total_cards,
            "sold_cards": dashboard.stats.sold_cards,
            "sellers": len(dashboard.sellers),
            "filtered_cards": dashboard.cards.total_items,
            "page": dashboard.cards.page,
            "duration_ms": duration_ms,
        },
    )
