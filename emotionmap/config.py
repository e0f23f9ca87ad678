"""Application settings loaded from the environment."""

import os
from dataclasses import dataclass, field
from os import getenv
from pathlib import Path
from typing import List, Optional

# Checked in order; the first existing file wins
ENV_FILE_PATHS = [
    Path("/opt/emotionmap/.env"),
    Path(__file__).parent.parent / ".env",
    Path.cwd() / ".env",
]

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./emotions.db"


def load_env_file_fallback(paths: Optional[List[Path]] = None) -> int:
    """
    Load KEY=VALUE pairs from the first .env file found.

    Variables already present in the environment are never overridden.
    Returns the number of variables that were set.
    """
    for env_file in paths if paths is not None else ENV_FILE_PATHS:
        if not (env_file.exists() and env_file.is_file()):
            continue
        loaded_count = 0
        with open(env_file, "r") as f:
            for line in f:
                line = line.strip()
                if not line or line.startswith("#") or "=" not in line:
                    continue
                key, value = line.split("=", 1)
                key = key.strip()
                value = value.strip()
                if len(value) >= 2 and value[0] == value[-1] and value[0] in ("'", '"'):
                    value = value[1:-1]
                if key and value and key not in os.environ:
                    os.environ[key] = value
                    loaded_count += 1
        return loaded_count
    return 0


def _bool_env(key: str, default: bool) -> bool:
    return getenv(key, "true" if default else "false").strip().lower() in ("1", "true", "yes", "on")


def _int_env(key: str, default: int) -> int:
    try:
        return int(getenv(key, str(default)))
    except ValueError:
        return default


def _parse_origins(raw: str) -> List[str]:
    # Wildcard anywhere means allow-all
    if "*" in raw:
        return ["*"]
    return [o.strip() for o in raw.split(",") if o.strip()]


@dataclass(frozen=True)
class Settings:
    """Runtime configuration for one application instance."""

    debug: bool = False
    database_url: str = DEFAULT_DATABASE_URL
    create_all: bool = True
    admin_token: Optional[str] = None
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    client_dir: Path = Path("client")
    host: str = "0.0.0.0"
    port: int = 5000

    @classmethod
    def from_env(cls) -> "Settings":
        load_env_file_fallback()
        return cls(
            debug=_bool_env("APP_DEBUG", False),
            database_url=getenv("DATABASE_URL", DEFAULT_DATABASE_URL),
            create_all=_bool_env("DB_CREATE_ALL", True),
            admin_token=getenv("ADMIN_TOKEN") or None,
            cors_origins=_parse_origins(getenv("CORS_ORIGINS", "*")),
            client_dir=Path(getenv("CLIENT_DIR", "client")),
            host=getenv("HOST", "0.0.0.0"),
            port=_int_env("PORT", 5000),
        )

    @property
    def masked_database_url(self) -> str:
        """Database URL with any password replaced by ***."""
        scheme, sep, rest = self.database_url.partition("://")
        if not sep or "@" not in rest:
            return self.database_url
        credentials, host_part = rest.rsplit("@", 1)
        if ":" in credentials:
            user = credentials.split(":", 1)[0]
            credentials = f"{user}:***"
        return f"{scheme}://{credentials}@{host_part}"
