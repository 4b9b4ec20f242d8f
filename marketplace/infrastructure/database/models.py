"""SQLAlchemy ORM models."""
import uuid

from sqlalchemy import CheckConstraint, Column, DateTime, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.sql import func

from .base import Base


def generate_uuid() -> str:
    return str(uuid.uuid4())


class Benefit(Base):
    __tablename__ = "benefits"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    name = Column(String(200), nullable=False, index=True)
    category = Column(String(20), nullable=False, index=True)
    description = Column(Text, nullable=False, default="")
    image_url = Column(String(500), nullable=False, default="")
    price = Column(Numeric(12, 2), nullable=False)
    in_stock = Column(Integer, nullable=False, default=0)
    expiration_date = Column(DateTime(timezone=True), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_benefits_price_non_negative"),
    )


class Wallet(Base):
    __tablename__ = "wallets"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    user_id = Column(String(36), nullable=False, unique=True, index=True)
    token_balance = Column(Integer, nullable=False, default=0)
    money_balance = Column(Numeric(12, 2), nullable=False, default=0)
    version = Column(Integer, nullable=False, default=0, server_default="0")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    __table_args__ = (
        CheckConstraint("token_balance >= 0", name="ck_wallets_token_balance_non_negative"),
    )


class OwnedBenefit(Base):
    __tablename__ = "owned_benefits"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    owner_id = Column(String(36), nullable=False, index=True)
    benefit_id = Column(String(36), nullable=False, index=True)
    purchased_at = Column(DateTime(timezone=True), nullable=False)
    content = Column(Text, nullable=False, default="")
    expiration_date = Column(DateTime(timezone=True), nullable=False)
    price_paid = Column(Integer, nullable=False)
    idempotency_key = Column(String(64), nullable=True)

    __table_args__ = (
        UniqueConstraint("owner_id", "idempotency_key", name="uq_owned_benefits_owner_idempotency_key"),
    )
