# formatkit/tracing/__init__.py
from .tracing import get_tracer, service_span, service_span_sync

__all__ = [
    "get_tracer",
    "service_span",
    "service_span_sync",
]
