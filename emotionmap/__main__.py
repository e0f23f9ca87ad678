"""Run the service with uvicorn: ``python -m emotionmap``."""

import uvicorn

from emotionmap.config import Settings
from emotionmap.main import create_app


def main() -> None:
    settings = Settings.from_env()
    uvicorn.run(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level="debug" if settings.debug else "info",
    )


if __name__ == "__main__":
    main()
