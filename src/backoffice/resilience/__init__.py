"""Resilience infrastructure for API calls with retry and failure logging."""

from backoffice.resilience.retry import resilient_api_call

__all__ = [
    "resilient_api_call",
]
