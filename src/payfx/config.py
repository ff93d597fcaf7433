from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field, ValidationError, field_validator

from payfx.exchange import SUBSCRIBERS
from payfx.messages import LANGUAGES
from payfx.payments import PAYMENT_STRATEGIES


class LoggingConfig(BaseModel):
    level: str = Field(default_factory=lambda: os.getenv("PAYFX_LOG_LEVEL", "WARNING"))
    format: str = "%(asctime)s %(levelname)s %(name)s - %(message)s"

    @field_validator("level")
    @classmethod
    def _valid_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"unknown log level {v}")
        return v


class OutputConfig(BaseModel):
    language: str = Field(default_factory=lambda: os.getenv("PAYFX_LANGUAGE", "en"))

    @field_validator("language")
    @classmethod
    def _valid_language(cls, v: str) -> str:
        v = v.lower()
        if v not in LANGUAGES:
            raise ValueError(f"language must be one of {LANGUAGES}, got {v}")
        return v


class PaymentStep(BaseModel):
    method: str
    amount: float

    @field_validator("method")
    @classmethod
    def _known_method(cls, v: str) -> str:
        v = v.lower()
        if v not in PAYMENT_STRATEGIES:
            raise ValueError(f"unknown payment method {v}")
        return v

    @field_validator("amount")
    @classmethod
    def _non_negative(cls, v: float) -> float:
        if v != v or v < 0:  # NaN
            raise ValueError("amount must be a non-negative number")
        return v


def _default_payments() -> List[PaymentStep]:
    return [
        PaymentStep(method="card", amount=100),
        PaymentStep(method="paypal", amount=200),
        PaymentStep(method="crypto", amount=300),
    ]


class DemoConfig(BaseModel):
    payments: List[PaymentStep] = Field(default_factory=_default_payments)
    subscribers: List[str] = Field(default_factory=lambda: ["bank", "stock_market", "forex"])
    # Rates broadcast before and after the detach step
    rates: List[float] = Field(default_factory=lambda: [1.2, 1.3])
    detach: List[str] = Field(default_factory=lambda: ["stock_market"])
    final_rates: List[float] = Field(default_factory=lambda: [1.4])

    @field_validator("subscribers", "detach")
    @classmethod
    def _known_subscribers(cls, v: List[str]) -> List[str]:
        names = [name.lower() for name in v]
        unknown = [name for name in names if name not in SUBSCRIBERS]
        if unknown:
            raise ValueError(f"unknown subscribers {unknown}")
        return names


class AppConfig(BaseModel):
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    output: OutputConfig = Field(default_factory=OutputConfig)
    demo: DemoConfig = Field(default_factory=DemoConfig)


def load_config(path: str | Path) -> AppConfig:
    path = Path(path)
    env_path = path.parent / ".env"
    load_dotenv(env_path, override=True)
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise RuntimeError(f"Invalid config: {e}") from e
    if not isinstance(data, dict):
        raise RuntimeError(f"Invalid config: expected a mapping at top level, got {type(data).__name__}")
    try:
        cfg = AppConfig(**data)
    except ValidationError as e:
        raise RuntimeError(f"Invalid config: {e}") from e
    # Environment wins over the file when set
    try:
        if os.getenv("PAYFX_LANGUAGE"):
            cfg.output = OutputConfig(language=os.environ["PAYFX_LANGUAGE"])
        if os.getenv("PAYFX_LOG_LEVEL"):
            cfg.logging = LoggingConfig(level=os.environ["PAYFX_LOG_LEVEL"], format=cfg.logging.format)
    except ValidationError as e:
        raise RuntimeError(f"Invalid environment override: {e}") from e
    return cfg
