"""Boletos de arrecadação: códigos, segmentos e decodificação."""
from .tipos import (
    Segmento,
    TipoValor
)

from .codigos import (
    TAMANHO_COD_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
    CodBarras,
    LinhaDigitavel,
    calcular_dv,
    cod_barras_para_linha_digitavel,
    linha_digitavel_para_cod_barras,
)

from .registro import (
    Arrecadacao,
    Convenio,
)

__all__ = [
    "Segmento",
    "TipoValor",
    "TAMANHO_COD_BARRAS",
    "TAMANHO_LINHA_DIGITAVEL",
    "CodBarras",
    "LinhaDigitavel",
    "calcular_dv",
    "cod_barras_para_linha_digitavel",
    "linha_digitavel_para_cod_barras",
    "Arrecadacao",
    "Convenio",
]
