"""
estate_http_api
---------------

HTTP API for the estate back office: properties, clients, contracts and
transactions, plus document-integrity services (signatures, timestamps,
biometric enrollment).

The ASGI application lives in ``estate_http_api.main``::

    uvicorn estate_http_api.main:app
"""

from importlib import metadata as _metadata

# ---------------------------------------------------------------------------
# Package metadata
# ---------------------------------------------------------------------------

try:
    __version__: str = _metadata.version("estate-backoffice")
except _metadata.PackageNotFoundError:  # When running from source tree
    __version__ = "0.0.0"


__all__ = ["__version__"]
