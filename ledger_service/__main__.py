"""Run the ledger service with uvicorn: ``python -m ledger_service``."""

import uvicorn

from ledger_service.core.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "ledger_service.main:create_app",
        factory=True,
        host=settings.host,
        port=settings.port,
        reload=settings.server.reload,
        log_level=settings.logging.level.lower(),
    )


if __name__ == "__main__":
    main()
