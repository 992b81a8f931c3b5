"""Process configuration read from the environment.

A ``.env`` file in the working directory is loaded first (without
overriding variables that are already set), so local development and
deployment use the same names.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from contratia.domain.model.order import OrderKind

DEFAULT_TIMEOUT = 30
DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_DATA_DIR = Path.home() / ".contratia"

_WEBHOOK_VARIABLES = {
    OrderKind.MUSIC: "MAKE_WEBHOOK_MUSIC",
    OrderKind.BOOTH: "MAKE_WEBHOOK_BOOTH",
    OrderKind.DJ: "MAKE_WEBHOOK_DJ",
}


@dataclass(frozen=True)
class Settings:
    data_dir: Path = DEFAULT_DATA_DIR
    webhook_urls: tuple[tuple[OrderKind, str], ...] = ()
    ai_endpoint: str = ""
    http_timeout: float = DEFAULT_TIMEOUT
    log_level: str = DEFAULT_LOG_LEVEL

    def webhook_url(self, kind: OrderKind) -> str:
        return dict(self.webhook_urls).get(kind, "")

    @staticmethod
    def from_env(load_dotenv_file: bool = True) -> Settings:
        if load_dotenv_file:
            load_dotenv(Path.cwd() / ".env")

        try:
            timeout = float(os.getenv("CONTRATIA_HTTP_TIMEOUT", DEFAULT_TIMEOUT))
        except ValueError:
            timeout = DEFAULT_TIMEOUT

        data_dir = os.getenv("CONTRATIA_DATA_DIR")
        return Settings(
            data_dir=Path(data_dir).expanduser() if data_dir else DEFAULT_DATA_DIR,
            webhook_urls=tuple(
                (kind, os.getenv(variable, "").strip())
                for kind, variable in _WEBHOOK_VARIABLES.items()
            ),
            ai_endpoint=os.getenv("CONTRATIA_AI_ENDPOINT", "").strip(),
            http_timeout=timeout,
            log_level=os.getenv("CONTRATIA_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper(),
        )
