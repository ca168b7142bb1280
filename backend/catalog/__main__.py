"""Run the catalog API under uvicorn: `python -m catalog`."""

import uvicorn

from catalog.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        "catalog.main:app",
        host=settings.server_host,
        port=settings.server_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
