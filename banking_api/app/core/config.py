"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  A ``.env`` file in the working directory is
loaded first so that local runs and the end‑to‑end suite can share the
same ``DEFAULT_USER_PASSWORD`` without exporting it by hand.  Defaults
are provided for every field except the default password, which must
be configured explicitly; without it every login attempt fails.
"""

import os
from dataclasses import dataclass
from typing import List, Optional

from dotenv import load_dotenv

load_dotenv()


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Banking API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "3001"))

    # Shared secret accepted for every user at login.  There are no
    # per‑user passwords; see ``core.security.verify_password``.
    default_user_password: Optional[str] = os.getenv("DEFAULT_USER_PASSWORD") or None

    # Sessions older than this are evicted the next time they are used.
    session_ttl_hours: int = int(os.getenv("SESSION_TTL_HOURS", "24"))

    # Comma‑separated list of origins allowed by the CORS middleware.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    @property
    def cors_origins_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

    @property
    def session_ttl_ms(self) -> int:
        return self.session_ttl_hours * 60 * 60 * 1000


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Other modules read the
# attributes at call time, so tests may patch them on this instance.
settings = Settings()
