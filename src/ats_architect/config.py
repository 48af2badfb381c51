"""Application configuration loaded from config.yaml."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

import yaml


@dataclass(frozen=True)
class LLMConfig:
    fast_model: str = "claude-haiku-4-5-20251001"
    review_model: str = "claude-sonnet-4-5-20250929"
    max_retries: int = 3
    timeout: int = 60


@dataclass(frozen=True)
class FixConfig:
    summary_fallback_role: str = "Professional"
    style_hint: str = "polish"


@dataclass(frozen=True)
class LoggingConfig:
    level: str = "WARNING"


@dataclass(frozen=True)
class AppConfig:
    llm: LLMConfig = field(default_factory=LLMConfig)
    fix: FixConfig = field(default_factory=FixConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults."""
    if path is None:
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text()) or {}

    return AppConfig(
        llm=LLMConfig(**raw.get("llm", {})),
        fix=FixConfig(**raw.get("fix", {})),
        logging=LoggingConfig(**raw.get("logging", {})),
    )
