# estate_http_api/db/models.py

from __future__ import annotations

import enum
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import (
    DateTime,
    Enum as SQLEnum,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column, relationship

from estate_http_api.clock import utcnow

# ---------------------------------------------------------------------------
# Base
# ---------------------------------------------------------------------------

Base = declarative_base()


class TimestampedMixin:
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        default=utcnow,
        onupdate=utcnow,
    )


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class SignatureDocumentType(str, enum.Enum):
    CONTRACT = "CONTRACT"
    AGREEMENT = "AGREEMENT"
    CONSENT = "CONSENT"
    NOTICE = "NOTICE"
    APPLICATION = "APPLICATION"


class SignatureStatus(str, enum.Enum):
    PENDING = "PENDING"
    SIGNED = "SIGNED"
    VERIFIED = "VERIFIED"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"
    INVALID = "INVALID"


class TimestampDocumentType(str, enum.Enum):
    CONTRACT = "CONTRACT"
    AGREEMENT = "AGREEMENT"
    CONSENT = "CONSENT"
    NOTICE = "NOTICE"
    APPLICATION = "APPLICATION"
    SIGNATURE = "SIGNATURE"
    BIOMETRIC = "BIOMETRIC"


class TimestampStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    REVOKED = "REVOKED"
    INVALID = "INVALID"


class BiometricType(str, enum.Enum):
    FINGERPRINT_LEFT_THUMB = "FINGERPRINT_LEFT_THUMB"
    FINGERPRINT_LEFT_INDEX = "FINGERPRINT_LEFT_INDEX"
    FINGERPRINT_LEFT_MIDDLE = "FINGERPRINT_LEFT_MIDDLE"
    FINGERPRINT_LEFT_RING = "FINGERPRINT_LEFT_RING"
    FINGERPRINT_LEFT_PINKY = "FINGERPRINT_LEFT_PINKY"
    FINGERPRINT_RIGHT_THUMB = "FINGERPRINT_RIGHT_THUMB"
    FINGERPRINT_RIGHT_INDEX = "FINGERPRINT_RIGHT_INDEX"
    FINGERPRINT_RIGHT_MIDDLE = "FINGERPRINT_RIGHT_MIDDLE"
    FINGERPRINT_RIGHT_RING = "FINGERPRINT_RIGHT_RING"
    FINGERPRINT_RIGHT_PINKY = "FINGERPRINT_RIGHT_PINKY"
    PALM_PRINT_LEFT = "PALM_PRINT_LEFT"
    PALM_PRINT_RIGHT = "PALM_PRINT_RIGHT"
    FACE_RECOGNITION = "FACE_RECOGNITION"
    IRIS_SCAN = "IRIS_SCAN"
    VOICE_PRINT = "VOICE_PRINT"


class BiometricStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    EXPIRED = "EXPIRED"
    SUSPENDED = "SUSPENDED"
    DELETED = "DELETED"


class PropertyType(str, enum.Enum):
    APARTMENT = "APARTMENT"
    HOUSE = "HOUSE"
    COMMERCIAL = "COMMERCIAL"
    LAND = "LAND"
    OFFICE = "OFFICE"
    WAREHOUSE = "WAREHOUSE"


class PropertyStatus(str, enum.Enum):
    AVAILABLE = "AVAILABLE"
    SOLD = "SOLD"
    RENTED = "RENTED"
    UNDER_CONTRACT = "UNDER_CONTRACT"
    MAINTENANCE = "MAINTENANCE"


class ClientType(str, enum.Enum):
    BUYER = "BUYER"
    SELLER = "SELLER"
    TENANT = "TENANT"
    LANDLORD = "LANDLORD"


class ClientStatus(str, enum.Enum):
    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    PENDING = "PENDING"


class ContractType(str, enum.Enum):
    SALE = "SALE"
    RENTAL = "RENTAL"
    LEASE = "LEASE"
    MANAGEMENT = "MANAGEMENT"


class ContractStatus(str, enum.Enum):
    DRAFT = "DRAFT"
    ACTIVE = "ACTIVE"
    EXPIRED = "EXPIRED"
    TERMINATED = "TERMINATED"
    PENDING = "PENDING"


class TransactionType(str, enum.Enum):
    PAYMENT = "PAYMENT"
    REFUND = "REFUND"
    COMMISSION = "COMMISSION"
    MAINTENANCE = "MAINTENANCE"
    INSURANCE = "INSURANCE"
    TAX = "TAX"


class TransactionStatus(str, enum.Enum):
    PENDING = "PENDING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"
    CANCELLED = "CANCELLED"


# ---------------------------------------------------------------------------
# Digital trust records
# ---------------------------------------------------------------------------


class DigitalSignature(TimestampedMixin, Base):
    """
    A signature made over a contract document.

    `signature_data` is the base64 signature blob; `signature_hash` is the
    digest of that blob and doubles as the deduplication key.
    """

    __tablename__ = "digital_signatures"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    signer_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    signer_name: Mapped[str] = mapped_column(String(255), nullable=False)
    contract_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    document_type: Mapped[SignatureDocumentType] = mapped_column(
        SQLEnum(SignatureDocumentType, name="signature_document_type_enum"),
        nullable=False,
    )

    signature_data: Mapped[str] = mapped_column(Text, nullable=False)
    signature_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)

    signed_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    status: Mapped[SignatureStatus] = mapped_column(
        SQLEnum(SignatureStatus, name="signature_status_enum"),
        nullable=False,
        default=SignatureStatus.PENDING,
        index=True,
    )
    verification_result: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<DigitalSignature id={self.id!r} contract_id={self.contract_id!r} status={self.status.value!r}>"


class DigitalTimestamp(TimestampedMixin, Base):
    """
    A timestamp token issued for a document by a timestamp authority.
    """

    __tablename__ = "digital_timestamps"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    document_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)

    document_type: Mapped[TimestampDocumentType] = mapped_column(
        SQLEnum(TimestampDocumentType, name="timestamp_document_type_enum"),
        nullable=False,
    )

    timestamp_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    timestamp_certificate: Mapped[str] = mapped_column(Text, nullable=False)
    timestamp_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    timestamp_authority: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    authority_certificate: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    status: Mapped[TimestampStatus] = mapped_column(
        SQLEnum(TimestampStatus, name="timestamp_status_enum"),
        nullable=False,
        default=TimestampStatus.ACTIVE,
        index=True,
    )
    verification_result: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<DigitalTimestamp id={self.id!r} document_id={self.document_id!r} status={self.status.value!r}>"


class BiometricData(TimestampedMixin, Base):
    """
    An enrolled biometric sample.

    Matching is exact equality on `biometric_hash`; the raw sample is kept
    in `biometric_data` as received (base64).
    """

    __tablename__ = "biometric_data"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(Integer, nullable=False, index=True)
    user_name: Mapped[str] = mapped_column(String(255), nullable=False)

    biometric_type: Mapped[BiometricType] = mapped_column(
        SQLEnum(BiometricType, name="biometric_type_enum"),
        nullable=False,
    )

    biometric_data: Mapped[str] = mapped_column(Text, nullable=False)
    biometric_hash: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    quality_score: Mapped[int] = mapped_column(Integer, nullable=False)

    registered_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    last_used_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    expires_at: Mapped[datetime] = mapped_column(DateTime, nullable=False)

    status: Mapped[BiometricStatus] = mapped_column(
        SQLEnum(BiometricStatus, name="biometric_status_enum"),
        nullable=False,
        default=BiometricStatus.ACTIVE,
        index=True,
    )
    verification_result: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)

    def __repr__(self) -> str:
        return f"<BiometricData id={self.id!r} user_id={self.user_id!r} type={self.biometric_type.value!r}>"


# ---------------------------------------------------------------------------
# Back office
# ---------------------------------------------------------------------------


class Property(TimestampedMixin, Base):
    __tablename__ = "properties"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(500), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    type: Mapped[PropertyType] = mapped_column(
        SQLEnum(PropertyType, name="property_type_enum"),
        nullable=False,
    )
    status: Mapped[PropertyStatus] = mapped_column(
        SQLEnum(PropertyStatus, name="property_status_enum"),
        nullable=False,
        default=PropertyStatus.AVAILABLE,
    )

    price: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    area: Mapped[Optional[Decimal]] = mapped_column(Numeric(10, 2), nullable=True)
    rooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    bathrooms: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    parking_spaces: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    year_built: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)

    contracts: Mapped[List["Contract"]] = relationship("Contract", back_populates="estate_property")

    def __repr__(self) -> str:
        return f"<Property id={self.id!r} name={self.name!r}>"


class Client(TimestampedMixin, Base):
    __tablename__ = "clients"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(String(500), nullable=True)

    type: Mapped[ClientType] = mapped_column(
        SQLEnum(ClientType, name="client_type_enum"),
        nullable=False,
    )
    status: Mapped[ClientStatus] = mapped_column(
        SQLEnum(ClientStatus, name="client_status_enum"),
        nullable=False,
        default=ClientStatus.ACTIVE,
    )

    contracts: Mapped[List["Contract"]] = relationship("Contract", back_populates="client")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return f"<Client id={self.id!r} email={self.email!r}>"


class Contract(TimestampedMixin, Base):
    __tablename__ = "contracts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    contract_number: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)

    property_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("properties.id"),
        nullable=True,
        index=True,
    )
    client_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("clients.id"),
        nullable=True,
        index=True,
    )

    type: Mapped[ContractType] = mapped_column(
        SQLEnum(ContractType, name="contract_type_enum"),
        nullable=False,
    )
    status: Mapped[ContractStatus] = mapped_column(
        SQLEnum(ContractStatus, name="contract_status_enum"),
        nullable=False,
        default=ContractStatus.DRAFT,
        index=True,
    )

    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    monthly_rent: Mapped[Optional[Decimal]] = mapped_column(Numeric(15, 2), nullable=True)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    terms: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    estate_property: Mapped[Optional[Property]] = relationship("Property", back_populates="contracts")
    client: Mapped[Optional[Client]] = relationship("Client", back_populates="contracts")
    transactions: Mapped[List["Transaction"]] = relationship(
        "Transaction",
        back_populates="contract",
        cascade="all, delete-orphan",
    )

    @property
    def property_name(self) -> Optional[str]:
        return self.estate_property.name if self.estate_property is not None else None

    @property
    def client_name(self) -> Optional[str]:
        return self.client.full_name if self.client is not None else None

    def __repr__(self) -> str:
        return f"<Contract id={self.id!r} number={self.contract_number!r} status={self.status.value!r}>"


class Transaction(TimestampedMixin, Base):
    __tablename__ = "transactions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    contract_id: Mapped[Optional[int]] = mapped_column(
        ForeignKey("contracts.id"),
        nullable=True,
        index=True,
    )

    type: Mapped[TransactionType] = mapped_column(
        SQLEnum(TransactionType, name="transaction_type_enum"),
        nullable=False,
    )
    amount: Mapped[Decimal] = mapped_column(Numeric(15, 2), nullable=False)
    transaction_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)

    status: Mapped[TransactionStatus] = mapped_column(
        SQLEnum(TransactionStatus, name="transaction_status_enum"),
        nullable=False,
        default=TransactionStatus.PENDING,
        index=True,
    )

    contract: Mapped[Optional[Contract]] = relationship("Contract", back_populates="transactions")

    def __repr__(self) -> str:
        return f"<Transaction id={self.id!r} type={self.type.value!r} amount={self.amount!r}>"
