from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from server.config.config import _env, _env_guaranteed


@dataclass
class ClientSettings:
    port: int = 3000
    host: str = "0.0.0.0"
    # the browser reaches the API over loopback, the rendering host over the
    # container network
    api_public_url: str = "http://localhost:8080/"
    api_internal_url: str = "http://express:8080"
    environment: Optional[str] = None
    api_timeout: Optional[float] = None


def load_client_settings() -> ClientSettings:
    timeout = _env("API_TIMEOUT")
    return ClientSettings(
        port=int(_env_guaranteed("CLIENT_PORT", "3000")),
        host=_env_guaranteed("HOST", "0.0.0.0"),
        api_public_url=_env_guaranteed("API_PUBLIC_URL", "http://localhost:8080/"),
        api_internal_url=_env_guaranteed("API_INTERNAL_URL", "http://express:8080"),
        environment=_env("ENVIRONMENT"),
        api_timeout=float(timeout) if timeout is not None else None,
    )
