"""Wallet endpoints."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.interfaces.http.deps import get_db_session, get_wallet_service
from marketplace.modules.wallets import WalletService
from marketplace.schemas import GrantTokensRequest, WalletCreateRequest, WalletResponse

router = APIRouter()


@router.get("", response_model=list[WalletResponse], summary="List all wallets")
async def list_wallets(service: WalletService = Depends(get_wallet_service)) -> list[WalletResponse]:
    wallets = await service.list_wallets()
    return [WalletResponse.model_validate(wallet) for wallet in wallets]


@router.post(
    "",
    response_model=WalletResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Open a wallet for a user (returns the existing one if present)",
)
async def open_wallet(
    payload: WalletCreateRequest,
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    wallet = await service.open_wallet(payload.user_id, payload.token_balance)
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.post("/grant", response_model=WalletResponse, summary="Grant tokens to a user's wallet")
async def grant_tokens(
    payload: GrantTokensRequest,
    service: WalletService = Depends(get_wallet_service),
    db: AsyncSession = Depends(get_db_session),
) -> WalletResponse:
    wallet = await service.grant_tokens(payload.user_id, payload.amount)
    await db.commit()
    return WalletResponse.model_validate(wallet)


@router.get("/{user_id}", response_model=WalletResponse, summary="Get a user's wallet")
async def get_wallet(user_id: str, service: WalletService = Depends(get_wallet_service)) -> WalletResponse:
    return WalletResponse.model_validate(await service.get_wallet(user_id))
