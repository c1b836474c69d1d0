"""
docbr/exceptions.py
-------------------
Erros levantados pelo motor de dígitos verificadores.

O validador nunca levanta: entrada malformada é simplesmente inválida.
"""

from __future__ import annotations


class DocumentError(Exception):
    """Base for every error raised by the docbr package."""


class InvalidLength(DocumentError, ValueError):
    """Sequence handed to the check-digit calculator has the wrong size or non-digit characters."""


class UnformattableInput(DocumentError, ValueError):
    """Digit count does not match the layout of the requested kind."""
