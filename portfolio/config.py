"""
Portfolio - Configuration
Build, output and verification settings. Every field can be overridden with a
PORTFOLIO_* environment variable or a .env file.
"""
from __future__ import annotations

import shlex
import sys
from pathlib import Path

from pydantic_settings import BaseSettings

ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # ── App ──────────────────────────────────────────────────────────────────
    app_name: str = "Portfolio"
    app_version: str = "1.0.0"
    log_level: str = "INFO"

    # ── Paths ─────────────────────────────────────────────────────────────────
    # Relative paths resolve against the project root, not the working dir.
    content_path: str = "./content/site.yaml"
    dist_dir: str = "./dist"
    evidence_dir: str = "./evidence"

    # ── Build ─────────────────────────────────────────────────────────────────
    build_command: str = ""       # empty = "<python> -m portfolio.site build"
    build_timeout_s: int = 300

    # ── Verification ──────────────────────────────────────────────────────────
    verify_workers: int = 1

    def resolve(self, value: str | Path) -> Path:
        p = Path(value)
        return p if p.is_absolute() else (ROOT / p).resolve()

    @property
    def dist_path(self) -> Path:
        return self.resolve(self.dist_dir)

    @property
    def content_file(self) -> Path:
        return self.resolve(self.content_path)

    @property
    def evidence_path(self) -> Path:
        return self.resolve(self.evidence_dir)

    @property
    def build_argv(self) -> list[str]:
        if self.build_command.strip():
            return shlex.split(self.build_command)
        return [sys.executable, "-m", "portfolio.site", "build"]

    class Config:
        env_prefix = "PORTFOLIO_"
        env_file = ".env"
        extra = "ignore"


settings = Settings()
