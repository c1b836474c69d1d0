"""
docbr/checksum.py
-----------------
Cálculo do dígito verificador (módulo 11) para CPF e CNPJ.

A passagem (1.º ou 2.º dígito) é deduzida do tamanho da sequência:
base → 1.ª passagem, base + 1 dígito → 2.ª passagem. Qualquer outro
tamanho é violação de contrato (InvalidLength).
"""

from __future__ import annotations

import re
from typing import Iterable, Union

from docbr.document import DocumentKind
from docbr.exceptions import InvalidLength


_NON_DIGITS_RE = re.compile(r"[^0-9]+")
_DIGITS_RE = re.compile(r"[0-9]*")

DigitsLike = Union[str, Iterable[int]]


def only_digits(value: str | None) -> str:
    """Retorna apenas os dígitos de uma string (remove pontuação e espaços)."""
    return _NON_DIGITS_RE.sub("", value or "")


def _as_digits(sequence: DigitsLike) -> tuple[int, ...]:
    if isinstance(sequence, str):
        if not _DIGITS_RE.fullmatch(sequence):
            raise InvalidLength(f"sequence must contain only digits: {sequence!r}")
        return tuple(int(c) for c in sequence)
    digits = tuple(sequence)
    if any(not isinstance(d, int) or isinstance(d, bool) or not 0 <= d <= 9 for d in digits):
        raise InvalidLength(f"sequence must contain only digits 0-9: {digits!r}")
    return digits


def _pass_for(length: int, kind: DocumentKind) -> int:
    if length == kind.base_length:
        return 1
    if length == kind.base_length + 1:
        return 2
    raise InvalidLength(
        f"{kind.label}: expected {kind.base_length} or {kind.base_length + 1} digits, got {length}"
    )


def mod11(digits: tuple[int, ...], weights: tuple[int, ...]) -> int:
    remainder = sum(d * w for d, w in zip(digits, weights)) % 11
    return 0 if remainder < 2 else 11 - remainder


def compute_check_digit(sequence: DigitsLike, kind: DocumentKind) -> int:
    """
    Compute one check digit for ``sequence``.

    ``sequence`` is either the base (first pass) or the base followed by the
    first check digit (second pass), as a digit string or an iterable of ints.
    """
    digits = _as_digits(sequence)
    weights = kind.weights(_pass_for(len(digits), kind))
    return mod11(digits, weights)


def check_digits(base: str, kind: DocumentKind) -> str:
    """Return the two check digits for a base, as a 2-character string."""
    first = compute_check_digit(base, kind)
    second = compute_check_digit(base + str(first), kind)
    return f"{first}{second}"
