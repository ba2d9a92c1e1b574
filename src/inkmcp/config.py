"""Runtime settings read from environment variables"""

import os
from pathlib import Path

PACKAGE_DATA_DIR = Path(__file__).parent / "data"


class Settings:
    """Settings snapshot taken from the environment at construction time

    Malformed values are kept so that `validate()` can report them instead
    of failing here.
    """

    def __init__(self, environ=None):
        env = os.environ if environ is None else environ

        self.DATA_DIR = Path(env.get("INK_DATA_DIR", str(PACKAGE_DATA_DIR)))
        self.SITE_URL = env.get("INK_SITE_URL", "https://wilderwrites.ink")
        self.LOG_LEVEL = env.get("INK_LOG_LEVEL", "INFO").upper()
        self.TRANSPORT = env.get("INK_TRANSPORT", "stdio").lower()
        self.HOST = env.get("HOST", "0.0.0.0")
        self.PORT_RAW = env.get("PORT", "8001")
        try:
            self.PORT = int(self.PORT_RAW)
        except ValueError:
            self.PORT = None

    def validate(self) -> list[str]:
        """Return a list of configuration errors (empty when valid)"""
        errors = []
        if self.TRANSPORT not in ("stdio", "http"):
            errors.append(f"Invalid INK_TRANSPORT: {self.TRANSPORT} (use stdio or http)")
        if self.LOG_LEVEL not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            errors.append(f"Invalid INK_LOG_LEVEL: {self.LOG_LEVEL}")
        if self.PORT is None or not 0 < self.PORT < 65536:
            errors.append(f"Invalid PORT: {self.PORT_RAW}")
        if not self.SITE_URL.startswith(("http://", "https://")):
            errors.append("INK_SITE_URL must start with http:// or https://")
        return errors


def get_settings() -> Settings:
    return Settings()
