"""Discover x.com GraphQL operations, generate client transaction IDs and send simple requests."""

__version__ = "0.1.0"

__all__ = [
    "cli",
    "cubic",
    "fetch",
    "interpolate",
    "jsmath",
    "migration",
    "operations",
    "request_client",
    "rotation",
    "transaction",
]