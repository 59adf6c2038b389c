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
        log_record["service"] = "finwell-gateway"


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


def log_analysis(
    request_id: str,
    profile_id: int | None,
    risk_level: str,
    recommendation_count: int,
    duration_ms: float,
) -> None:
    """Log structured analysis outcome"""
    logging.info(
        "Analysis completed",
        extra={
            "request_id": request_id,
            "profile_id": profile_id,
            "step": "analysis_complete",
            "risk_level": risk_level,
            "recommendation_count": recommendation_count,
            "duration_ms": duration_ms,
        },
    )


def log_operation(request_id: str, operation: str, profile_count: int, duration_ms: float) -> None:
    """Log completion of a read-only operation over stored profiles"""
    logging.info(
        "Operation completed",
        extra={
            "request_id": request_id,
            "step": f"{operation}_complete",
            "profile_count": profile_count,
            "duration_ms": duration_ms,
        },
    )
