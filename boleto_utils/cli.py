"""Utilitario de linha de comando para decodificar boletos.

Uso:
    boleto info 75691434360103372340200149330011690380000250000
    boleto info "75691.43436 01033.723402 00149.330011 6 90380000250000" -f json
    boleto digito-verificador 81605555555555566667777777777777777777777777
"""

import argparse
import logging
import sys

from . import config
from .base import normalizar_entrada
from .boleto import Boleto
from .errors import BoletoError
from .formatos import FORMATOS, formatar_digitos_texto, formatar_texto

logger = logging.getLogger(__name__)


def _info(args) -> str:
    boleto = Boleto.parse(normalizar_entrada(args.codigo))
    if args.formato == "text":
        return formatar_texto(boleto)
    return FORMATOS[args.formato](boleto.to_dict())


def _digito_verificador(args) -> str:
    resultado = Boleto.calcular_digitos_verificadores(normalizar_entrada(args.codigo))
    if args.formato == "text":
        return formatar_digitos_texto(resultado)
    return FORMATOS[args.formato](resultado.to_dict())


def _parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="boleto",
        description="Decodifica e valida códigos de barras e linhas digitáveis de boletos",
    )
    subparsers = parser.add_subparsers(dest="comando", required=True)

    comum = argparse.ArgumentParser(add_help=False)
    comum.add_argument("codigo", help="Código de barras ou linha digitável")
    comum.add_argument(
        "-f",
        "--format",
        dest="formato",
        choices=["text", "json", "yaml"],
        default="text",
        help="Formato da saída (padrão: text)",
    )

    info = subparsers.add_parser(
        "info",
        aliases=["i"],
        parents=[comum],
        help="Analisa o código de barras retornando os dados extraídos.",
    )
    info.set_defaults(executar=_info)

    dv = subparsers.add_parser(
        "digito-verificador",
        aliases=["dv"],
        parents=[comum],
        help="Calcula os dígitos verificadores validando apenas o mínimo necessário.",
    )
    dv.set_defaults(executar=_digito_verificador)

    return parser.parse_args(argv)


def _nivel_log(nome: str) -> int:
    nivel = logging.getLevelName(nome)
    return nivel if isinstance(nivel, int) else logging.WARNING


def main(argv=None) -> int:
    """Ponto de entrada principal do CLI."""
    logging.basicConfig(
        level=_nivel_log(config.LOG_LEVEL),
        format="%(levelname)s %(name)s: %(message)s",
    )
    args = _parse_args(argv)

    try:
        saida = args.executar(args)
    except BoletoError as e:
        logger.debug("Falha ao processar %r", args.codigo, exc_info=True)
        print(f"Erro: {e}", file=sys.stderr)
        return 1

    print(saida)
    return 0


if __name__ == "__main__":
    sys.exit(main())
