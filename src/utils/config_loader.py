"""
Configuration loader for the cheque collection and loan APIs
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Dict, Literal, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

logger = logging.getLogger(__name__)

_TRUTHY = {"1", "true", "yes", "on"}

# Simulated latency per cheque store operation, in milliseconds
DEFAULT_DELAYS_MS: Dict[str, int] = {
    "list": 300,
    "get": 200,
    "create": 300,
    "update": 300,
    "upload": 800,
    "submit": 1000,
    "cancel": 300,
}


class MockConfig(BaseModel):
    """Simulated network behaviour of the in-memory cheque store"""

    simulate_latency: bool = True
    delays_ms: Dict[str, int] = Field(default_factory=lambda: dict(DEFAULT_DELAYS_MS))


class IntegrationsConfig(BaseModel):
    """Mock vs real bank adapter selection"""

    mode: Literal["mock", "real"] = "mock"
    cheque_bank_timeout_seconds: float = Field(default=20.0, gt=0)


class LoansConfig(BaseModel):
    """Loan data provider settings"""

    auth_disabled: bool = False
    functions_base_url: str = "http://localhost:8000/functions/v1"
    timeout_seconds: float = Field(default=15.0, gt=0)


class AppConfig(BaseModel):
    mock: MockConfig = Field(default_factory=MockConfig)
    integrations: IntegrationsConfig = Field(default_factory=IntegrationsConfig)
    loans: LoansConfig = Field(default_factory=LoansConfig)


def env_flag(name: str, default: bool = False) -> bool:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in _TRUTHY


def load_app_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load and validate application configuration from YAML, then apply
    environment overrides (INTEGRATIONS_MODE, AUTH_DISABLED, LOAN_FUNCTIONS_URL,
    MOCK_SIMULATE_LATENCY).

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValidationError: If config doesn't match schema
    """
    if config_path is None:
        config_path = Path(__file__).parent.parent.parent / "config" / "app_config.yml"

    if not config_path.exists():
        raise FileNotFoundError(f"App config file not found: {config_path}")

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    try:
        cfg = AppConfig(**data)
    except ValidationError as e:
        logger.error("App config validation failed: %s", e)
        raise

    mode = os.getenv("INTEGRATIONS_MODE", "").strip().lower()
    if mode in {"real", "live"}:
        cfg.integrations.mode = "real"
    elif mode in {"mock", "test"}:
        cfg.integrations.mode = "mock"

    cfg.loans.auth_disabled = env_flag("AUTH_DISABLED", cfg.loans.auth_disabled)
    cfg.loans.functions_base_url = os.getenv("LOAN_FUNCTIONS_URL", cfg.loans.functions_base_url).rstrip("/")
    cfg.mock.simulate_latency = env_flag("MOCK_SIMULATE_LATENCY", cfg.mock.simulate_latency)

    logger.info("Successfully loaded app config from %s (integrations=%s)", config_path, cfg.integrations.mode)
    return cfg
