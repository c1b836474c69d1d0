"""
docbr/formatter.py
------------------
Máscaras de exibição:

  * CPF  → 000.000.000-00
  * CNPJ → 00.000.000/0000-00

Ao contrário da ferramenta antiga, que devolvia a entrada intacta quando o
padrão não casava, aqui o tamanho errado levanta UnformattableInput.
"""

from __future__ import annotations

import re

from docbr.checksum import only_digits
from docbr.document import DocumentKind
from docbr.exceptions import UnformattableInput


# ── Padrões ────────────────────────────────────────────────────────────────────
_PUNCTUATION_RE = re.compile(r"[.\-/\s]+")
_PATTERNS = {
    DocumentKind.CPF: (re.compile(r"^([0-9]{3})([0-9]{3})([0-9]{3})([0-9]{2})$"), r"\1.\2.\3-\4"),
    DocumentKind.CNPJ: (re.compile(r"^([0-9]{2})([0-9]{3})([0-9]{3})([0-9]{4})([0-9]{2})$"), r"\1.\2.\3/\4-\5"),
}


def strip_punctuation(value: str | None) -> str:
    return only_digits(value)


def format_document(value: str, kind: DocumentKind) -> str:
    """Apply the mask of ``kind``; dots, dashes, slashes and spaces are discarded first."""
    digits = _PUNCTUATION_RE.sub("", value or "")
    pattern, template = _PATTERNS[kind]
    if not pattern.match(digits):
        raise UnformattableInput(
            f"{kind.label} precisa de {kind.length} dígitos (apenas . - / e espaços como separadores): {value!r}"
        )
    return pattern.sub(template, digits)


def format_cpf(value: str) -> str:
    return format_document(value, DocumentKind.CPF)


def format_cnpj(value: str) -> str:
    return format_document(value, DocumentKind.CNPJ)
