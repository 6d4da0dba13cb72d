"""Provider settings loaded from the environment or a YAML file."""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import BaseModel, Field

from .providers.base import BaseProvider
from .providers.bridge import BridgeProvider, NativeBridge
from .providers.http import DEFAULT_HOST, HttpProvider

logger = logging.getLogger(__name__)

ENV_PREFIX = "ETHRPC_"


def _env_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class ProviderSettings(BaseModel):
    """Settings for building a provider."""

    host: str = DEFAULT_HOST
    timeout: float = Field(default=0, ge=0)
    with_credentials: bool = False
    keep_alive: bool = True
    headers: Dict[str, str] = Field(default_factory=dict)
    bridge_namespace: str = "eth"
    address: Optional[str] = None
    chain_id: Optional[Union[int, str]] = None

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX) -> "ProviderSettings":
        """Read settings from ``<prefix>HOST``, ``<prefix>TIMEOUT`` and so on.

        Headers are given as ``Name: value`` pairs separated by ``;``.
        """
        values: Dict[str, Any] = {}
        for field in ("host", "bridge_namespace", "address", "chain_id"):
            value = os.getenv(f"{prefix}{field.upper()}")
            if value:
                values[field] = value
        timeout = os.getenv(f"{prefix}TIMEOUT")
        if timeout:
            values["timeout"] = float(timeout)
        for field in ("with_credentials", "keep_alive"):
            value = os.getenv(f"{prefix}{field.upper()}")
            if value:
                values[field] = _env_bool(value)
        headers = os.getenv(f"{prefix}HEADERS")
        if headers:
            values["headers"] = dict(
                (name.strip(), value.strip())
                for name, _, value in (item.partition(":") for item in headers.split(";"))
                if name.strip()
            )
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: Union[str, Path]) -> "ProviderSettings":
        """Load settings from a YAML file, either top-level or under ``provider:``."""
        with open(path) as f:
            config = yaml.safe_load(f) or {}
        if not isinstance(config, dict):
            raise ValueError(f"Provider config in {path} must be a mapping")
        section = config.get("provider", config)
        logger.info(f"Loaded provider settings from {path}")
        return cls(**section)


def create_provider(
    settings: Optional[ProviderSettings] = None,
    bridge: Optional[NativeBridge] = None
) -> BaseProvider:
    """Build the provider described by ``settings``.

    With a ``bridge`` the result is a BridgeProvider that falls back to an
    HttpProvider for the methods it does not intercept.
    """
    settings = settings or ProviderSettings()
    http_provider = HttpProvider(
        host=settings.host,
        timeout=settings.timeout,
        with_credentials=settings.with_credentials,
        headers=settings.headers,
        keep_alive=settings.keep_alive,
    )
    if bridge is None:
        return http_provider
    return BridgeProvider(
        bridge,
        fallback=http_provider,
        namespace=settings.bridge_namespace,
        address=settings.address,
        chain_id=settings.chain_id,
    )
