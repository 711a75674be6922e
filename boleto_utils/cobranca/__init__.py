"""Boletos de cobrança: códigos, decodificação e montagem."""
from .codigos import (
    TAMANHO_COD_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
    CodBarras,
    LinhaDigitavel,
    calcular_dv_campos,
    cod_barras_para_linha_digitavel,
    linha_digitavel_para_cod_barras,
)

from .registro import (
    Cobranca,
    CodigoMoeda,
)

from .builder import (
    CobrancaBuilder
)

__all__ = [
    "TAMANHO_COD_BARRAS",
    "TAMANHO_LINHA_DIGITAVEL",
    "CodBarras",
    "LinhaDigitavel",
    "calcular_dv_campos",
    "cod_barras_para_linha_digitavel",
    "linha_digitavel_para_cod_barras",
    "Cobranca",
    "CodigoMoeda",
    "CobrancaBuilder",
]
