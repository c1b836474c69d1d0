"""
docbr/output.py
---------------
Modos de apresentação de um número gerado.

  raw               → dígitos puros, enviados ao log
  raw-insert        → dígitos puros, escritos na saída
  formatted         → com máscara, enviados ao log
  formatted-insert  → com máscara, escritos na saída
"""

from __future__ import annotations

import logging
import sys
from enum import Enum
from typing import Optional, TextIO

from docbr.document import DocumentKind
from docbr.formatter import format_document


class OutputMode(str, Enum):
    RAW = "raw"
    RAW_INSERT = "raw-insert"
    FORMATTED = "formatted"
    FORMATTED_INSERT = "formatted-insert"

    def __str__(self) -> str:
        return self.value

    @property
    def formatted(self) -> bool:
        return self in (OutputMode.FORMATTED, OutputMode.FORMATTED_INSERT)

    @property
    def insert(self) -> bool:
        return self in (OutputMode.RAW_INSERT, OutputMode.FORMATTED_INSERT)


def render(number: str, kind: DocumentKind, mode: OutputMode) -> str:
    return format_document(number, kind) if mode.formatted else number


class Presenter:
    """
    Entrega números ao chamador conforme o modo: modos de log vão para o
    logger, modos de inserção vão para o stream (stdout por padrão).
    """
    def __init__(
        self,
        mode: OutputMode,
        stream: Optional[TextIO] = None,
        log: Optional[logging.Logger] = None,
    ) -> None:
        self.mode = mode
        self._stream = stream
        self._log = log or logging.getLogger(__name__)

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def emit(self, number: str, kind: DocumentKind) -> str:
        text = render(number, kind, self.mode)
        if self.mode.insert:
            self.stream.write(text + "\n")
        else:
            self._log.info("%s: %s", kind.label, text)
        return text
