from __future__ import annotations

import os
from dataclasses import dataclass
from decimal import Decimal

from dotenv import load_dotenv


load_dotenv()


def _env(name: str, default: str | None = None) -> str | None:
    return os.getenv(name, default)


def _csv(name: str, default: str) -> tuple[str, ...]:
    value = _env(name, default) or ""
    return tuple(item.strip() for item in value.split(",") if item.strip())


@dataclass(frozen=True)
class Settings:
    fee_ratio: Decimal
    powered_by: str
    log_level: str
    cors_allow_origins: tuple[str, ...]


def get_settings() -> Settings:
    return Settings(
        fee_ratio=Decimal(_env("LP_FEE_RATIO", "0.003")),
        powered_by=_env("POWERED_BY", "Sommelier Finance"),
        log_level=(_env("LOG_LEVEL", "INFO") or "INFO").upper(),
        cors_allow_origins=_csv("CORS_ALLOW_ORIGINS", "*"),
    )
