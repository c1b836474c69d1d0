"""
docbr/validator.py
------------------
Validação de CPF/CNPJ, com ou sem máscara.

Entrada vem do usuário: tamanho errado ou lixo retornam False, nunca
levantam exceção. Números com todos os dígitos iguais seguem a regra do
módulo 11 (ex.: 000.000.000-00 é válido) a não ser que o chamador peça
``reject_repeated=True``.
"""

from __future__ import annotations

import logging

from docbr.checksum import compute_check_digit, only_digits
from docbr.document import DocumentKind


logger = logging.getLogger(__name__)


def validate(candidate: str | None, kind: DocumentKind, *, reject_repeated: bool = False) -> bool:
    digits = only_digits(candidate)
    if len(digits) != kind.length:
        logger.debug("%s: %d dígitos, esperado %d", kind.label, len(digits), kind.length)
        return False

    if reject_repeated and digits == digits[0] * kind.length:
        return False

    base, supplied = digits[:-2], digits[-2:]

    first = compute_check_digit(base, kind)
    if first != int(supplied[0]):
        return False

    second = compute_check_digit(base + str(first), kind)
    return second == int(supplied[1])


def validate_cpf(candidate: str | None, *, reject_repeated: bool = False) -> bool:
    return validate(candidate, DocumentKind.CPF, reject_repeated=reject_repeated)


def validate_cnpj(candidate: str | None, *, reject_repeated: bool = False) -> bool:
    return validate(candidate, DocumentKind.CNPJ, reject_repeated=reject_repeated)
