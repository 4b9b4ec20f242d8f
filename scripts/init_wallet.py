"""
Open a wallet for a user and optionally grant it tokens.

    python -m scripts.init_wallet <user_id> --tokens 100
"""
import argparse
import asyncio

from marketplace.core.config import get_settings
from marketplace.infrastructure.database import Database
from marketplace.modules.wallets import WalletService


async def init_wallet(user_id: str, tokens: int) -> None:
    database = Database.from_settings(get_settings())
    await database.create_all()

    try:
        async with database.session() as db:
            service = WalletService.with_session(db)
            wallet = await service.open_wallet(user_id)
            if tokens:
                wallet = await service.grant_tokens(user_id, tokens)
    finally:
        await database.dispose()

    print(f"Wallet {wallet.id} for user {wallet.user_id}: {wallet.token_balance} tokens")


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__.strip().splitlines()[0])
    parser.add_argument("user_id", help="UUID of the wallet owner")
    parser.add_argument("--tokens", type=int, default=0, help="tokens to grant after opening")
    args = parser.parse_args()
    asyncio.run(init_wallet(args.user_id, args.tokens))


if __name__ == "__main__":
    main()
