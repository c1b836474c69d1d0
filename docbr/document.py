"""
docbr/document.py
-----------------
Tipos de documento suportados (CPF e CNPJ) e as constantes de cada um:
tamanho da base, tamanho completo e tabelas de pesos por passagem.

  * CPF  → 9 dígitos de base + 2 verificadores
  * CNPJ → 8 dígitos de raiz + filial "0001" + 2 verificadores
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


# ── Pesos ──────────────────────────────────────────────────────────────────────
_CPF_WEIGHTS = (
    (10, 9, 8, 7, 6, 5, 4, 3, 2),
    (11, 10, 9, 8, 7, 6, 5, 4, 3, 2),
)
_CNPJ_WEIGHTS = (
    (5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
    (6, 5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2),
)

CNPJ_BRANCH = "0001"  # matriz


class DocumentKind(str, Enum):
    CPF = "cpf"
    CNPJ = "cnpj"

    def __str__(self) -> str:
        return self.value

    @property
    def label(self) -> str:
        return self.name

    @property
    def base_length(self) -> int:
        """Digits before the check-digit pair (12 for CNPJ, branch included)."""
        return 9 if self is DocumentKind.CPF else 12

    @property
    def length(self) -> int:
        return self.base_length + 2

    def weights(self, pass_number: int) -> tuple[int, ...]:
        """Weight list for the first (1) or second (2) check-digit pass."""
        if pass_number not in (1, 2):
            raise ValueError(f"pass_number must be 1 or 2, got {pass_number!r}")
        table = _CPF_WEIGHTS if self is DocumentKind.CPF else _CNPJ_WEIGHTS
        return table[pass_number - 1]

    @classmethod
    def detect(cls, digits: str) -> Optional["DocumentKind"]:
        """Guess the kind from a digit-only string; None when the size fits neither."""
        for kind in cls:
            if len(digits) == kind.length:
                return kind
        return None
