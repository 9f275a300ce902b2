"""
Record stores backed by SQLAlchemy sessions.

Each repository wraps a single table and never commits; transaction
boundaries belong to the services.
"""

from .biometrics import BiometricsRepository
from .clients import ClientsRepository
from .contracts import ContractsRepository
from .properties import PropertiesRepository
from .signatures import SignaturesRepository
from .timestamps import TimestampsRepository
from .transactions import TransactionsRepository

__all__ = [
    "BiometricsRepository",
    "ClientsRepository",
    "ContractsRepository",
    "PropertiesRepository",
    "SignaturesRepository",
    "TimestampsRepository",
    "TransactionsRepository",
]
