"""
docbr/generator.py
------------------
Geração de CPF/CNPJ aleatórios com dígitos verificadores válidos.

Só a base é sorteada; os verificadores são derivados dela. O gerador não
precisa ser criptograficamente seguro.
"""

from __future__ import annotations

import random
from typing import Optional

from docbr.checksum import compute_check_digit
from docbr.document import CNPJ_BRANCH, DocumentKind


_DIGITS = "0123456789"
_default_rng = random.Random()


def generate_base(kind: DocumentKind, rng: Optional[random.Random] = None) -> str:
    """
    Random base for ``kind``: 9 digits for CPF, 8 digits plus the branch
    code "0001" for CNPJ.
    """
    rng = rng or _default_rng
    drawn = kind.base_length - (len(CNPJ_BRANCH) if kind is DocumentKind.CNPJ else 0)
    base = "".join(rng.choices(_DIGITS, k=drawn))
    if kind is DocumentKind.CNPJ:
        base += CNPJ_BRANCH
    return base


def complete(base: str, kind: DocumentKind) -> str:
    """Append both check digits to ``base``."""
    with_first = base + str(compute_check_digit(base, kind))
    return with_first + str(compute_check_digit(with_first, kind))


def generate(kind: DocumentKind, rng: Optional[random.Random] = None) -> str:
    """Complete number (11 or 14 raw digits, no punctuation)."""
    return complete(generate_base(kind, rng), kind)


def generate_cpf(rng: Optional[random.Random] = None) -> str:
    return generate(DocumentKind.CPF, rng)


def generate_cnpj(rng: Optional[random.Random] = None) -> str:
    return generate(DocumentKind.CNPJ, rng)
