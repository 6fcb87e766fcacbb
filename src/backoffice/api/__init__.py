"""Backoffice REST API client and per-resource service functions."""

from backoffice.api.client import BackofficeClient, unwrap_data

__all__ = [
    "BackofficeClient",
    "unwrap_data",
]
