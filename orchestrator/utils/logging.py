"""
Structured logging utilities with correlation IDs.

This module provides structured logging configuration using structlog
with correlation ID tracking for request tracing across services.
"""

import os
import uuid
import logging
from typing import Optional, Any
from contextvars import ContextVar

import structlog
from structlog.types import EventDict


# Context variable for correlation ID (thread-safe)
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def set_correlation_id(correlation_id: Optional[str] = None) -> str:
    """
    Set correlation ID for current context.

    Args:
        correlation_id: Optional correlation ID (generates new UUID if not provided)

    Returns:
        str: The correlation ID that was set
    """
    if correlation_id is None:
        correlation_id = str(uuid.uuid4())
    correlation_id_var.set(correlation_id)
    return correlation_id


def get_correlation_id() -> Optional[str]:
    """Get correlation ID for current context."""
    return correlation_id_var.get()


def add_correlation_id(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """
    Add correlation ID to log event.

    structlog processor that adds the correlation ID to every log entry.
    """
    correlation_id = get_correlation_id()
    if correlation_id:
        event_dict["correlation_id"] = correlation_id
    return event_dict


def configure_logging(log_level: Optional[str] = None) -> None:
    """
    Configure structured logging with structlog.

    Args:
        log_level: Optional log level (defaults to env LOG_LEVEL or INFO)
    """
    level = log_level or os.getenv("LOG_LEVEL", "INFO")

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level.upper()),
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            add_correlation_id,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer()
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        structlog.stdlib.BoundLogger: Configured logger instance

    Example:
        logger = get_logger(__name__)
        logger.info("cluster_config_resolved", cluster_id=cluster.id)
    """
    return structlog.get_logger(name)


def log_container_event(
    logger: structlog.stdlib.BoundLogger,
    event: str,
    cluster_id: int,
    namespace: str,
    pod_name: str,
    container_name: str,
    **kwargs: Any
) -> None:
    """
    Log an ephemeral container event with the standard identifying fields.

    Args:
        logger: Structured logger instance
        event: Event name (e.g., "ephemeral_container_audited")
        cluster_id: Cluster the pod runs in
        namespace: Pod namespace
        pod_name: Pod name
        container_name: Ephemeral container name
        **kwargs: Additional fields to log
    """
    logger.info(
        event,
        cluster_id=cluster_id,
        namespace=namespace,
        pod_name=pod_name,
        container_name=container_name,
        **kwargs
    )


# Initialize logging on module import
configure_logging()
