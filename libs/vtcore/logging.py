"""Log and trace plumbing for the theory engine.

Engine modules take their loggers from :func:`get_logger` and wrap their
public entry points in :func:`traced`; neither configures any output. The
process embedding the engine calls :func:`setup_logging` once to route the
``vtharmony``/``vtmotif`` loggers to stdout, and :func:`setup_tracing` to
export spans when an OTLP endpoint is configured.
"""

from __future__ import annotations

import json
import logging
import sys
from contextlib import nullcontext
from typing import Any, ContextManager, Optional, Tuple

from .config import get_settings

try:
    # Optional OTEL tracing
    from opentelemetry import trace
    from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
    from opentelemetry.sdk.resources import Resource
    from opentelemetry.sdk.trace import TracerProvider
    from opentelemetry.sdk.trace.export import BatchSpanProcessor
except Exception:  # pragma: no cover - OTEL is optional
    trace = None  # type: ignore

SERVICE_NAME = "vibes-theory"

# Top-level loggers owned by the engine packages
ENGINE_LOGGERS: Tuple[str, ...] = ("vtharmony", "vtmotif")

# Structured context the engine passes via ``extra=``
CONTEXT_FIELDS: Tuple[str, ...] = (
    "motif_id",
    "overall",
    "energy_profile",
    "families",
    "candidate_count",
)

TEXT_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with engine context and trace ids."""

    def format(self, record: logging.LogRecord) -> str:  # noqa: D401
        payload = {
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
        }
        for field in CONTEXT_FIELDS:
            if hasattr(record, field):
                payload[field] = getattr(record, field)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        # Attach trace IDs if available
        span = trace.get_current_span() if trace else None
        if span is not None:
            ctx = span.get_span_context()
            if ctx is not None and ctx.is_valid:
                payload["trace_id"] = format(ctx.trace_id, "032x")
                payload["span_id"] = format(ctx.span_id, "016x")
        return json.dumps(payload, ensure_ascii=False, default=str)


def get_logger(name: str) -> logging.Logger:
    """Logger for an engine module; ``name`` is the module's ``__name__``."""
    if name.split(".")[0] not in ENGINE_LOGGERS:
        raise ValueError(f"{name!r} is not an engine module")
    return logging.getLogger(name)


def setup_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> logging.Handler:
    """Send engine log records to stdout.

    Only the engine loggers are touched; the root logger and any handlers the
    host process installed elsewhere are left alone. Calling this again
    replaces the previous handler.

    Args:
        level: Log level name; defaults to VT_LOG_LEVEL
        fmt: ``"json"`` or ``"text"``; defaults to VT_LOG_FORMAT

    Returns:
        The installed handler
    """
    s = get_settings()
    log_level = (level or s.VT_LOG_LEVEL).upper()
    log_format = (fmt or s.VT_LOG_FORMAT).lower()
    if log_format not in ("json", "text"):
        raise ValueError(f"Log format must be 'json' or 'text', got {fmt!r}")

    handler = logging.StreamHandler(sys.stdout)
    if log_format == "text":
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))
    else:
        handler.setFormatter(JsonFormatter())

    for name in ENGINE_LOGGERS:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        logger.addHandler(handler)
        logger.setLevel(getattr(logging, log_level, logging.INFO))
        logger.propagate = False
    return handler


def setup_tracing(service_name: str = SERVICE_NAME) -> bool:
    """Initialize OpenTelemetry tracing if endpoint is configured.

    Returns True when a tracer provider was installed.
    """
    s = get_settings()
    if not s.VT_OTEL_ENDPOINT or not trace:
        return False

    resource = Resource.create(
        {"service.name": service_name, "deployment.environment": s.VT_ENV}
    )
    provider = TracerProvider(resource=resource)
    processor = BatchSpanProcessor(OTLPSpanExporter(endpoint=s.VT_OTEL_ENDPOINT))
    provider.add_span_processor(processor)
    trace.set_tracer_provider(provider)
    return True


def traced(span_name: str, **attributes: Any) -> ContextManager[Any]:
    """Span around an engine call; a no-op without OpenTelemetry installed."""
    if trace is None:
        return nullcontext()
    return trace.get_tracer(SERVICE_NAME).start_as_current_span(
        span_name, attributes=attributes or None
    )


__all__ = [
    "ENGINE_LOGGERS",
    "JsonFormatter",
    "get_logger",
    "setup_logging",
    "setup_tracing",
    "traced",
]
