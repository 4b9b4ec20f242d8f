"""Per-user views."""

from fastapi import APIRouter, Depends

from marketplace.interfaces.http.deps import get_ownership_service
from marketplace.modules.ownership import OwnershipService
from marketplace.schemas import OwnedBenefitResponse

router = APIRouter()


@router.get("/{user_id}/benefits", response_model=list[OwnedBenefitResponse], summary="Benefits owned by a user")
async def list_owned_benefits(
    user_id: str,
    service: OwnershipService = Depends(get_ownership_service),
) -> list[OwnedBenefitResponse]:
    owned = await service.list_owned_benefits(user_id)
    return [OwnedBenefitResponse.model_validate(record) for record in owned]
