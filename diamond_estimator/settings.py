# Runtime settings for the estimator app and CLI, read from the environment.
# A local `.env` file is honoured through python-dotenv.

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

from dotenv import load_dotenv

ENV_PREFIX = "DIAMOND_ESTIMATOR_"


@dataclass(frozen=True)
class AppSettings:
    title: str
    log_level: str
    currency_symbol: str
    port: int
    server_address: str


def _env(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def load_settings(*, load_env: bool = True) -> AppSettings:
    if load_env:
        load_dotenv()

    port_raw = _env("PORT", "8501")
    try:
        port = int(port_raw)
    except ValueError as exc:
        raise RuntimeError(f"Invalid {ENV_PREFIX}PORT: {port_raw!r}") from exc

    return AppSettings(
        title=_env("TITLE", "Diamond Price Estimator"),
        log_level=_env("LOG_LEVEL", "INFO").upper(),
        currency_symbol=_env("CURRENCY_SYMBOL", "$"),
        port=port,
        server_address=_env("ADDRESS", "localhost"),
    )


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    return load_settings()
