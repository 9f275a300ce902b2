"""
Service layer for the Estate HTTP API.

Services own business rules and transaction boundaries; they receive their
repositories through the constructor so tests can hand in a session bound to
a throwaway database.
"""

from .biometric_service import BiometricService, quality_level
from .client_service import ClientService
from .contract_service import ContractService
from .property_service import PropertyService
from .signature_service import SignatureService
from .timestamp_service import TimestampService
from .transaction_service import TransactionService

__all__ = [
    "BiometricService",
    "ClientService",
    "ContractService",
    "PropertyService",
    "SignatureService",
    "TimestampService",
    "TransactionService",
    "quality_level",
]
