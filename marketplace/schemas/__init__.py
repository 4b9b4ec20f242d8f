"""Pydantic schemas used across the project."""
from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer

from marketplace.modules.benefits import BenefitCategory, BenefitInput

# Decimals travel as JSON numbers, matching what catalog clients send.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class SuccessResponse(BaseModel):
    message: str


class BenefitBase(BaseModel):
    name: str = Field(..., min_length=1, max_length=200)
    category: BenefitCategory
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl", max_length=500)
    price: Decimal = Field(..., ge=0, max_digits=12, decimal_places=2)
    in_stock: int = Field(default=0, ge=0, alias="inStock")
    expiration_date: datetime = Field(..., alias="expirationDate")

    model_config = ConfigDict(populate_by_name=True)

    def to_input(self) -> BenefitInput:
        return BenefitInput(
            name=self.name,
            category=self.category,
            description=self.description,
            image_url=self.image_url,
            price=self.price,
            in_stock=self.in_stock,
            expiration_date=self.expiration_date,
        )


class BenefitCreate(BenefitBase):
    pass


class BenefitUpdate(BenefitBase):
    id: Optional[str] = None


class BenefitResponse(BaseModel):
    id: str
    name: str
    category: BenefitCategory
    description: str
    image_url: str = Field(alias="imageUrl")
    price: JsonDecimal
    in_stock: int = Field(alias="inStock")
    expiration_date: datetime = Field(alias="expirationDate")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)


class WalletResponse(BaseModel):
    id: str
    user_id: str
    token_balance: int
    money_balance: JsonDecimal
    updated_at: Optional[datetime] = None

    model_config = ConfigDict(from_attributes=True)


class WalletCreateRequest(BaseModel):
    user_id: str
    token_balance: int = Field(default=0, ge=0)


class GrantTokensRequest(BaseModel):
    user_id: str
    amount: int = Field(..., ge=0)


class PurchaseRequest(BaseModel):
    user_id: str
    idempotency_key: Optional[str] = Field(default=None, min_length=1, max_length=64)


class OwnedBenefitResponse(BaseModel):
    id: str
    owner_id: str = Field(alias="ownerId")
    benefit_id: str = Field(alias="benefitId")
    purchased_at: datetime = Field(alias="purchased")
    content: str
    expiration_date: datetime = Field(alias="expirationDate")
    price_paid: int = Field(alias="pricePaid")
    idempotency_key: Optional[str] = Field(default=None, alias="idempotencyKey")

    model_config = ConfigDict(from_attributes=True, populate_by_name=True)
