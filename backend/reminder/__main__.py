"""Run the API under uvicorn: ``python -m reminder``."""
from __future__ import annotations

import uvicorn

from reminder.core.config import get_settings


def main() -> None:
    settings = get_settings()
    # uvicorn stops accepting on SIGINT/SIGTERM and drains in-flight requests
    # before the lifespan shutdown disposes the pool
    uvicorn.run(
        "reminder.main:create_app",
        factory=True,
        host=settings.APP_HOST,
        port=settings.APP_PORT,
    )


if __name__ == "__main__":
    main()
