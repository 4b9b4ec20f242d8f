"""Benefit catalog and purchase endpoints."""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.interfaces.http.deps import (
    get_benefit_service,
    get_db_session,
    get_purchase_service,
)
from marketplace.modules.benefits import BenefitFilter, BenefitService
from marketplace.modules.purchases import PurchaseService
from marketplace.schemas import (
    BenefitCreate,
    BenefitResponse,
    BenefitUpdate,
    OwnedBenefitResponse,
    PurchaseRequest,
    SuccessResponse,
)

router = APIRouter()


def _to_schema(benefit) -> BenefitResponse:
    return BenefitResponse.model_validate(benefit)


@router.get("", response_model=list[BenefitResponse], summary="List benefits, optionally filtered")
async def list_benefits(
    category: Optional[str] = Query(default=None),
    min_price: Optional[str] = Query(default=None),
    max_price: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    service: BenefitService = Depends(get_benefit_service),
) -> list[BenefitResponse]:
    criteria = BenefitFilter.parse(
        category=category,
        min_price=min_price,
        max_price=max_price,
        search=search,
    )
    benefits = await service.list_benefits(criteria)
    return [_to_schema(benefit) for benefit in benefits]


@router.post(
    "",
    response_model=BenefitResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a benefit to the catalog",
)
async def add_benefit(
    payload: BenefitCreate,
    service: BenefitService = Depends(get_benefit_service),
    db: AsyncSession = Depends(get_db_session),
) -> BenefitResponse:
    benefit = await service.add_benefit(payload.to_input())
    await db.commit()
    return _to_schema(benefit)


@router.get("/{benefit_id}", response_model=BenefitResponse, summary="Get a benefit")
async def get_benefit(
    benefit_id: str,
    service: BenefitService = Depends(get_benefit_service),
) -> BenefitResponse:
    return _to_schema(await service.get_benefit(benefit_id))


@router.put("/{benefit_id}", response_model=BenefitResponse, summary="Replace a benefit")
async def update_benefit(
    benefit_id: str,
    payload: BenefitUpdate,
    service: BenefitService = Depends(get_benefit_service),
    db: AsyncSession = Depends(get_db_session),
) -> BenefitResponse:
    benefit = await service.update_benefit(benefit_id, payload.to_input(), body_id=payload.id)
    await db.commit()
    return _to_schema(benefit)


@router.delete("/{benefit_id}", response_model=SuccessResponse, summary="Delete a benefit")
async def delete_benefit(
    benefit_id: str,
    service: BenefitService = Depends(get_benefit_service),
    db: AsyncSession = Depends(get_db_session),
) -> SuccessResponse:
    await service.delete_benefit(benefit_id)
    await db.commit()
    return SuccessResponse(message="Benefit deleted successfully")


@router.post("/{benefit_id}/buy", response_model=OwnedBenefitResponse, summary="Buy a benefit with tokens")
async def buy_benefit(
    benefit_id: str,
    payload: PurchaseRequest,
    service: PurchaseService = Depends(get_purchase_service),
) -> OwnedBenefitResponse:
    owned = await service.purchase(payload.user_id, benefit_id, payload.idempotency_key)
    return OwnedBenefitResponse.model_validate(owned)
