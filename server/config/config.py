from __future__ import annotations

import os
from pathlib import Path
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

from server.utils.logger import log_msg

env_default = Path(__file__).parent / ".." / ".." / ".env"
if not os.path.exists(env_default):
    log_msg(f"Warning: env file at {env_default} doesn't exist!")
else:
    load_dotenv(env_default, encoding="utf-8")

DEFAULT_GREETING = "Hello, FastAPI with Python and CORS!"

def _env(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name)
    return v if v not in (None, "") else default

def _env_guaranteed(name: str, default: str) -> str:
    v = os.getenv(name)
    return v if v not in (None, "") else default

def _env_list(name: str, default: str) -> List[str]:
    raw = _env_guaranteed(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]

@dataclass
class Settings:
    environment: str = "production"
    port: int = 8080
    host: str = "0.0.0.0"
    greeting: str = DEFAULT_GREETING
    cors_origins: List[str] = field(default_factory=lambda: ["*"])

def load_settings() -> Settings:
    return Settings(
        environment=_env_guaranteed("ENVIRONMENT", "production"),
        port=int(_env_guaranteed("PORT", "8080")),
        host=_env_guaranteed("HOST", "0.0.0.0"),
        greeting=_env_guaranteed("GREETING", DEFAULT_GREETING),
        cors_origins=_env_list("CORS_ORIGINS", "*"),
    )
