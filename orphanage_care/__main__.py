# orphanage_care/__main__.py
import uvicorn

from orphanage_care.core.config import settings


def main() -> None:
    uvicorn.run(
        "orphanage_care.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
