"""Run the service with uvicorn: ``python -m gke_demo``."""

from __future__ import annotations

import structlog
import uvicorn

from gke_demo.core.config import settings
from gke_demo.main import app

log = structlog.get_logger()


def main() -> None:
    log.info(
        "gke_demo listening",
        host=settings.service_host,
        port=settings.service_port,
    )
    uvicorn.run(
        app,
        host=settings.service_host,
        port=settings.service_port,
        log_level=settings.log_level.lower(),
        log_config=None,
    )


if __name__ == "__main__":
    main()
