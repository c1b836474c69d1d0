"""
main.py
-------
Ponto de entrada da aplicação.

Uso:
  python main.py --gerar cpf -n 5                  # gerar 5 CPFs formatados
  python main.py --gerar cnpj --modo raw-insert    # CNPJ puro na saída padrão
  python main.py --validar 529.982.247-25          # validar (tipo detectado)
  python main.py --formatar 11222333000181         # aplicar máscara
  python main.py --verificar documento.txt         # checar CPFs/CNPJs de um texto
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Optional, TextIO

from config.settings import Settings, settings
from docbr.checksum import only_digits
from docbr.document import DocumentKind
from docbr.exceptions import DocumentError
from docbr.formatter import format_document
from docbr.generator import generate
from docbr.identifier import ExtractorIdentifier
from docbr.output import OutputMode, Presenter
from docbr.validator import validate


# ── Módulo 1: Gerar ────────────────────────────────────────────────────────────

def gerar(
    kind: DocumentKind,
    quantidade: int,
    presenter: Presenter,
    rng: Optional[random.Random] = None,
) -> list[str]:
    """Generate ``quantidade`` numbers of ``kind`` and hand each to the presenter."""
    logger = logging.getLogger("main.gerar")
    logger.debug("Gerando %d %s (modo %s)", quantidade, kind.label, presenter.mode)
    return [presenter.emit(generate(kind, rng), kind) for _ in range(quantidade)]


# ── Módulo 2: Validar ──────────────────────────────────────────────────────────

def validar(
    valores: list[str],
    kind: Optional[DocumentKind] = None,
    reject_repeated: bool = False,
) -> bool:
    """Validate each value; returns True only when every value is valid."""
    logger = logging.getLogger("main.validar")
    validos = invalidos = 0

    for valor in valores:
        tipo = kind or DocumentKind.detect(only_digits(valor))
        if tipo is None:
            logger.warning("[INVÁLIDO] %s — tamanho não corresponde a CPF nem CNPJ", valor)
            invalidos += 1
            continue

        if validate(valor, tipo, reject_repeated=reject_repeated):
            logger.info("[OK] %s %s", tipo.label, valor)
            validos += 1
        else:
            logger.warning("[INVÁLIDO] %s %s", tipo.label, valor)
            invalidos += 1

    logger.info("  Válidos   : %d", validos)
    logger.info("  Inválidos : %d", invalidos)
    return invalidos == 0


# ── Módulo 3: Formatar ─────────────────────────────────────────────────────────

def formatar(
    valores: list[str],
    kind: Optional[DocumentKind] = None,
    stream: Optional[TextIO] = None,
) -> bool:
    """Write the masked form of each value; False if any value could not be formatted."""
    logger = logging.getLogger("main.formatar")
    out = stream if stream is not None else sys.stdout
    ok = True

    for valor in valores:
        tipo = kind or DocumentKind.detect(only_digits(valor))
        try:
            if tipo is None:
                raise DocumentError(f"não foi possível identificar o tipo de {valor!r}")
            out.write(format_document(valor, tipo) + "\n")
        except DocumentError as e:
            logger.error("[ERRO] %s", e)
            ok = False

    return ok


# ── Módulo 4: Verificar texto ──────────────────────────────────────────────────

def verificar(caminho: str, reject_repeated: bool = False) -> bool:
    """Scan a text file (``-`` for stdin) and report every CPF/CNPJ found."""
    logger = logging.getLogger("main.verificar")

    if caminho == "-":
        texto = sys.stdin.read()
    else:
        path = Path(caminho)
        try:
            texto = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.error("Não foi possível ler %s: %s", path, e)
            return False

    encontrados = ExtractorIdentifier(reject_repeated=reject_repeated).extract_all(texto)
    if not encontrados:
        logger.warning("Nenhum CPF/CNPJ encontrado em: %s", caminho)
        return True

    for ident in encontrados:
        status = "OK" if ident.valido else "INVÁLIDO"
        level = logging.INFO if ident.valido else logging.WARNING
        logger.log(level, "[%s] %s %s (posição %d)", status, ident.tipo.label, ident.formatado, ident.posicao)

    invalidos = sum(1 for ident in encontrados if not ident.valido)
    logger.info("  Encontrados : %d", len(encontrados))
    logger.info("  Inválidos   : %d", invalidos)
    return invalidos == 0


# ── Entry point ───────────────────────────────────────────────────────────────

def _configure_logging(cfg: Settings) -> None:
    if logging.getLogger().handlers:
        return
    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if cfg.LOG_FILE:
        handlers.append(logging.FileHandler(cfg.LOG_FILE, encoding="utf-8"))
    logging.basicConfig(
        level=cfg.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        handlers=handlers,
    )


def build_parser(cfg: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="main.py",
        description="Gerador, validador e formatador de CPF e CNPJ",
    )
    kinds = [k.value for k in DocumentKind]

    action = parser.add_mutually_exclusive_group()
    action.add_argument(
        "--gerar", "--generate",
        dest="gerar",
        nargs="?",
        const=cfg.TIPO_PADRAO.value,
        choices=kinds,
        help="[gerar|generate] Gera números válidos do tipo informado (padrão: %(const)s)",
    )
    action.add_argument(
        "--validar", "--validate",
        dest="validar",
        nargs="+",
        metavar="VALOR",
        help="[validar|validate] Valida um ou mais números (com ou sem máscara)",
    )
    action.add_argument(
        "--formatar", "--format",
        dest="formatar",
        nargs="+",
        metavar="VALOR",
        help="[formatar|format] Aplica a máscara de CPF/CNPJ",
    )
    action.add_argument(
        "--verificar", "--scan",
        dest="verificar",
        metavar="ARQUIVO",
        help="[verificar|scan] Procura e valida CPFs/CNPJs num arquivo de texto ('-' = stdin)",
    )

    parser.add_argument(
        "--tipo", "--kind",
        dest="tipo",
        choices=kinds,
        help="Tipo do documento para --validar/--formatar (padrão: detectar pelo tamanho)",
    )
    parser.add_argument(
        "-n", "--quantidade",
        dest="quantidade",
        type=int,
        default=cfg.QUANTIDADE,
        help="Quantidade de números a gerar (padrão: %(default)s)",
    )
    parser.add_argument(
        "--modo", "--mode",
        dest="modo",
        choices=[m.value for m in OutputMode],
        default=cfg.MODO_SAIDA.value,
        help="Modo de apresentação dos números gerados (padrão: %(default)s)",
    )
    parser.add_argument(
        "--saida", "--output",
        dest="saida",
        metavar="ARQUIVO",
        help="Arquivo para os modos de inserção (padrão: saída padrão)",
    )
    parser.add_argument(
        "--semente", "--seed",
        dest="semente",
        type=int,
        default=cfg.SEMENTE,
        help="Semente do gerador aleatório",
    )
    parser.add_argument(
        "--rejeitar-repetidos",
        dest="rejeitar_repetidos",
        action=argparse.BooleanOptionalAction,
        default=cfg.REJEITAR_REPETIDOS,
        help="Considera inválidos números com todos os dígitos iguais (padrão: %(default)s)",
    )
    return parser


def main(argv: Optional[list[str]] = None, cfg: Optional[Settings] = None) -> int:
    if cfg is None:
        cfg = settings
    _configure_logging(cfg)

    parser = build_parser(cfg)
    args = parser.parse_args(argv)

    if not (args.gerar or args.validar or args.formatar or args.verificar):
        parser.print_help()
        return 0

    if args.quantidade < 1:
        parser.error("--quantidade deve ser pelo menos 1")

    tipo = DocumentKind(args.tipo) if args.tipo else None

    if args.gerar:
        rng = random.Random(args.semente) if args.semente is not None else None
        mode = OutputMode(args.modo)
        if args.saida and not mode.insert:
            parser.error(f"--saida só vale para os modos de inserção, não para {mode}")
        if args.saida:
            with open(args.saida, "a", encoding="utf-8") as f:
                gerar(DocumentKind(args.gerar), args.quantidade, Presenter(mode, stream=f), rng)
        else:
            gerar(DocumentKind(args.gerar), args.quantidade, Presenter(mode), rng)
        return 0

    if args.validar:
        return 0 if validar(args.validar, tipo, args.rejeitar_repetidos) else 1

    if args.formatar:
        return 0 if formatar(args.formatar, tipo) else 1

    return 0 if verificar(args.verificar, args.rejeitar_repetidos) else 1


if __name__ == "__main__":
    sys.exit(main())
