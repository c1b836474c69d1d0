"""
config/settings.py
------------------
Central configuration using pydantic.BaseSettings.  Environment variables are
loaded from a `.env` file in the project root; validation, defaulting and
conversion are handled automatically.  This file exports a single `settings`
instance that the rest of the codebase can import.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from docbr.document import DocumentKind
from docbr.output import OutputMode


BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # ── logging ─────────────────────────────────────────────────────────────
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[Path] = None

    # ── geração ─────────────────────────────────────────────────────────────
    TIPO_PADRAO: DocumentKind = DocumentKind.CPF
    MODO_SAIDA: OutputMode = OutputMode.FORMATTED
    QUANTIDADE: int = Field(default=1, ge=1)
    SEMENTE: Optional[int] = None

    # ── validação ───────────────────────────────────────────────────────────
    REJEITAR_REPETIDOS: bool = False

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, value: str) -> str:
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"nível de log desconhecido: {value!r}")
        return level

    @field_validator("TIPO_PADRAO", "MODO_SAIDA", mode="before")
    @classmethod
    def _lower_enum(cls, value):
        return value.lower() if isinstance(value, str) else value

    class Config:
        env_file = BASE_DIR / ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"  # allow unrelated env vars


# single, shared settings object
settings = Settings()
