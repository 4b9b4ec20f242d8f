"""Run the API with ``python -m marketplace``."""

import uvicorn

from marketplace.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "marketplace.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
