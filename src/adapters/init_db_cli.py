"""CLI adapter creating the dashboard tables.

Existing tables are left untouched, so the command can be run on every
deployment.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.schema import create_schema, metadata


def main() -> None:
    """Create every missing dashboard table."""
    logger = get_app_logger()
    engine = build_database_adapter().get_engine()
    create_schema(engine)
    tables = ", ".join(sorted(metadata.tables))
    logger.info(f"Schema ready: {tables}")
    print(f"Created or verified {len(metadata.tables)} tables.")


if __name__ == "__main__":  # pragma: no cover
    main()
