"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
import os

import dotenv

from src.domain.constants import DEFAULT_FIRE_TARGET, RELATED_POSTS_LIMIT
from src.infrastructure.logging.logger import get_app_logger

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}

DEFAULT_API_HOST = "127.0.0.1"
DEFAULT_API_PORT = 8000


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the dashboard and API adapters.

    Attributes:
        admin_password: Password unlocking the admin page; None disables it.
        include_zero_allocations: Keep zero-valued allocation points.
        default_fire_target: FIRE target used when a snapshot has none.
        related_posts_limit: Number of related posts to return.
        cors_origins: Origins allowed to call the JSON API.
        api_host: Interface the JSON API server binds to.
        api_port: Port the JSON API server listens on.
    """

    admin_password: str | None = None
    include_zero_allocations: bool = True
    default_fire_target: Decimal = DEFAULT_FIRE_TARGET
    related_posts_limit: int = RELATED_POSTS_LIMIT
    cors_origins: tuple[str, ...] = field(default_factory=tuple)
    api_host: str = DEFAULT_API_HOST
    api_port: int = DEFAULT_API_PORT

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
            Invalid values are logged and replaced by the defaults.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        return cls(
            admin_password=os.getenv("ADMIN_PASSWORD") or None,
            include_zero_allocations=cls._parse_bool(
                "ALLOCATION_INCLUDE_ZERO",
                default=True,
                logger=logger,
            ),
            default_fire_target=cls._parse_fire_target(logger),
            related_posts_limit=cls._parse_limit(logger),
            cors_origins=cls._parse_origins(os.getenv("API_CORS_ORIGINS")),
            api_host=(os.getenv("API_HOST") or "").strip() or DEFAULT_API_HOST,
            api_port=cls._parse_port(logger),
        )

    @staticmethod
    def _parse_bool(name: str, default: bool, logger) -> bool:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        cleaned = raw.strip().lower()
        if cleaned in _TRUE_VALUES:
            return True
        if cleaned in _FALSE_VALUES:
            return False
        logger.warning(f"Invalid {name}={raw!r}, using {default}")
        return default

    @staticmethod
    def _parse_fire_target(logger) -> Decimal:
        raw = os.getenv("DEFAULT_FIRE_TARGET")
        if not raw:
            return DEFAULT_FIRE_TARGET
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            value = None
        if value is None or not value.is_finite() or value <= 0:
            logger.warning(
                f"Invalid DEFAULT_FIRE_TARGET={raw!r}, "
                f"using {DEFAULT_FIRE_TARGET}"
            )
            return DEFAULT_FIRE_TARGET
        return value

    @staticmethod
    def _parse_limit(logger) -> int:
        raw = os.getenv("RELATED_POSTS_LIMIT")
        if not raw:
            return RELATED_POSTS_LIMIT
        try:
            value = int(raw.strip())
        except ValueError:
            value = -1
        if value < 0:
            logger.warning(
                f"Invalid RELATED_POSTS_LIMIT={raw!r}, "
                f"using {RELATED_POSTS_LIMIT}"
            )
            return RELATED_POSTS_LIMIT
        return value

    @staticmethod
    def _parse_port(logger) -> int:
        raw = os.getenv("API_PORT")
        if not raw:
            return DEFAULT_API_PORT
        try:
            value = int(raw.strip())
        except ValueError:
            value = 0
        if not 0 < value < 65536:
            logger.warning(
                f"Invalid API_PORT={raw!r}, using {DEFAULT_API_PORT}"
            )
            return DEFAULT_API_PORT
        return value

    @staticmethod
    def _parse_origins(raw: str | None) -> tuple[str, ...]:
        if not raw:
            return ()
        return tuple(
            origin.strip() for origin in raw.split(",") if origin.strip()
        )


__all__ = ["DashboardSettings"]
