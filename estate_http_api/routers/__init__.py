"""
HTTP routers, one per resource. ``main.create_app`` mounts them all under
the configured API prefix.
"""

from . import (
    biometric,
    clients,
    contracts,
    properties,
    signatures,
    timestamps,
    transactions,
)

ALL_ROUTERS = [
    signatures.router,
    timestamps.router,
    biometric.router,
    properties.router,
    clients.router,
    contracts.router,
    transactions.router,
]

__all__ = ["ALL_ROUTERS"]
