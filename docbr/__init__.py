"""Geração, validação e formatação de CPF e CNPJ."""

from docbr.document import DocumentKind
from docbr.exceptions import DocumentError, InvalidLength, UnformattableInput
from docbr.formatter import format_cnpj, format_cpf, format_document
from docbr.generator import generate, generate_cnpj, generate_cpf
from docbr.validator import validate, validate_cnpj, validate_cpf

__all__ = [
    "DocumentKind",
    "DocumentError",
    "InvalidLength",
    "UnformattableInput",
    "format_cnpj",
    "format_cpf",
    "format_document",
    "generate",
    "generate_cnpj",
    "generate_cpf",
    "validate",
    "validate_cnpj",
    "validate_cpf",
]
