"""
docbr/identifier.py
-------------------
Localiza números de CPF e CNPJ em um bloco de texto e valida cada um.

Regras:
  * CNPJ é procurado antes do CPF; trechos já reconhecidos como CNPJ não
    são reaproveitados como CPF
  * números colados a outros dígitos são ignorados
"""
from __future__ import annotations

import re
from dataclasses import dataclass

from docbr.checksum import only_digits
from docbr.document import DocumentKind
from docbr.formatter import format_document
from docbr.validator import validate


# ── Padrões ────────────────────────────────────────────────────────────────────
_CNPJ_RE = re.compile(r"(?<!\d)(\d{2}[.\s]?\d{3}[.\s]?\d{3}[/\s]?\d{4}[-\s]?\d{2})(?!\d)")
_CPF_RE  = re.compile(r"(?<!\d)(\d{3}[.\s]?\d{3}[.\s]?\d{3}[-\s]?\d{2})(?!\d)")


@dataclass(frozen=True)
class Identifier:
    valor: str                 # somente dígitos
    tipo: DocumentKind
    valido: bool
    posicao: int = 0

    def __str__(self) -> str:
        return self.valor

    @property
    def formatado(self) -> str:
        return format_document(self.valor, self.tipo)


class ExtractorIdentifier:
    """Extract every CPF/CNPJ found in a text block, in reading order."""

    def __init__(self, reject_repeated: bool = False) -> None:
        self.reject_repeated = reject_repeated

    # ── extratores brutos ──────────────────────────────────────────────────────
    def _scan(self, text: str, pattern: re.Pattern, kind: DocumentKind, taken: list[tuple[int, int]]):
        for m in pattern.finditer(text):
            start, end = m.span(1)
            if any(start < t_end and t_start < end for t_start, t_end in taken):
                continue
            raw = only_digits(m.group(1))
            if len(raw) != kind.length:
                continue
            taken.append((start, end))
            yield Identifier(
                valor=raw,
                tipo=kind,
                valido=validate(raw, kind, reject_repeated=self.reject_repeated),
                posicao=start,
            )

    # ── interface pública ────────────────────────────────────────────────────
    def extract_all(self, text: str) -> list[Identifier]:
        taken: list[tuple[int, int]] = []
        found = list(self._scan(text, _CNPJ_RE, DocumentKind.CNPJ, taken))
        found.extend(self._scan(text, _CPF_RE, DocumentKind.CPF, taken))
        return sorted(found, key=lambda ident: ident.posicao)
