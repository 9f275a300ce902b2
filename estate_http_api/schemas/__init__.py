"""
Pydantic request/response models for the Estate HTTP API.

Routers import the concrete models from their submodules; the shared base
and envelope types are re-exported here.
"""

from .common import APIModel, ErrorResponse, HealthResponse, OperationResponse

__all__ = ["APIModel", "ErrorResponse", "HealthResponse", "OperationResponse"]
