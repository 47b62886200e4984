"""CLI adapter serving the JSON API with uvicorn."""

import uvicorn

from src.adapters.api.app import create_app
from src.infrastructure.container import build_settings
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Serve the JSON API on the configured host and port."""
    logger = get_app_logger()
    settings = build_settings()
    app = create_app(settings=settings)
    logger.info(f"Serving API on {settings.api_host}:{settings.api_port}")
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)


if __name__ == "__main__":  # pragma: no cover
    main()
