# catalog_service/__main__.py
import uvicorn

from . import config


def main() -> None:
    uvicorn.run(
        "catalog_service.main:app",
        host=config.HOST,
        port=config.PORT,
        log_level=config.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
