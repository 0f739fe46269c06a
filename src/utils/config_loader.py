"""
Configuration loader for the checkout gateway.

Values come from ``config/checkout_config.yml`` (optional) and are then
overridden by environment variables. Secrets never live in either place:
credentials and access tokens arrive with each request.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Literal, Mapping, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "config" / "checkout_config.yml"
DEFAULT_PORT = 8081

_FIELD_TO_ENV_KEY = {
    "base_url": "MERCADOPAGO_API_URL",
    "timeout_seconds": "MERCADOPAGO_TIMEOUT_SECONDS",
    "integrations_mode": "INTEGRATIONS_MODE",
    "log_level": "LOG_LEVEL",
    "port": "PORT",
}


class GatewayConfig(BaseModel):
    """Checkout gateway configuration"""

    base_url: str = "https://api.mercadopago.com"
    timeout_seconds: float = Field(default=20.0, gt=0, le=300)
    integrations_mode: Literal["real", "live", "mock", "test"] = "real"
    log_level: Literal["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"] = "INFO"
    port: int = Field(default=DEFAULT_PORT, ge=1, le=65535)

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    @field_validator("integrations_mode", mode="before")
    @classmethod
    def _normalize_mode(cls, value: Any) -> Any:
        return value.strip().lower() if isinstance(value, str) else value

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    @property
    def uses_real_integrations(self) -> bool:
        return self.integrations_mode in {"real", "live"}


def normalize_port(raw: Optional[str]) -> int:
    """Accept ``8080`` or ``:8080``; fall back to the default port when unset."""
    value = (raw or "").strip()
    if value.startswith(":"):
        value = value[1:]
    if not value:
        logger.info("defaulting to port %s", DEFAULT_PORT)
        return DEFAULT_PORT
    return int(value)


def load_gateway_config(
    config_path: Optional[Path] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> GatewayConfig:
    """
    Load and validate gateway configuration

    Args:
        config_path: Path to a YAML config file. Defaults to CHECKOUT_CONFIG_PATH
            or config/checkout_config.yml; the default file may be absent.
        environ: Environment mapping used for overrides. Defaults to os.environ.

    Returns:
        Validated GatewayConfig object

    Raises:
        FileNotFoundError: If an explicitly requested config file doesn't exist
        ValidationError: If the merged values don't match the schema
        ValueError: If PORT is not a number
    """
    environ = os.environ if environ is None else environ

    explicit = config_path is not None or bool(environ.get("CHECKOUT_CONFIG_PATH"))
    if config_path is None:
        config_path = Path(environ.get("CHECKOUT_CONFIG_PATH") or DEFAULT_CONFIG_PATH)

    data: Dict[str, Any] = {}
    if config_path.exists():
        with open(config_path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    elif explicit:
        raise FileNotFoundError(f"Checkout config file not found: {config_path}")

    data.update(_env_overrides(environ))

    try:
        config = GatewayConfig(**data)
        logger.info("Loaded checkout gateway config (mode=%s, base_url=%s)", config.integrations_mode, config.base_url)
        return config
    except ValidationError as e:
        logger.error("Checkout config validation failed: %s", e)
        raise


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    overrides: Dict[str, Any] = {}
    for field_name, env_key in _FIELD_TO_ENV_KEY.items():
        if env_key not in environ:
            continue
        value = environ[env_key]
        if field_name == "port":
            overrides[field_name] = normalize_port(value)
        elif value.strip():
            overrides[field_name] = value
    return overrides
