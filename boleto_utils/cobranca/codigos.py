"""Código de barras e linha digitável de boletos de cobrança.

Posições (índices Python):

    Código de barras (44)
    00000000001111111111222222222233333333334444
    01234567890123456789012345678901234567890123
    AAABKUUUUVVVVVVVVVVCCCCCDDDDDDDDDDEEEEEEEEEE

    Linha digitável (47)
    00000 00000 11111 111112 22222 222233 3 33333334444444
    01234.56789 01234.567890 12345.678901 2 34567890123456
    AAABC.CCCCX DDDDD.DDDDDY EEEEE.EEEEEZ K UUUUVVVVVVVVVV

    A = banco, B = moeda, K = DV geral, U = fator de vencimento,
    V = valor, C/D/E = campo livre, X/Y/Z = DVs dos campos (módulo 10).
"""

from ..base import modulo10, modulo11_boleto, validar_entrada
from ..errors import InvalidCobrancaBarcodeError

TAMANHO_COD_BARRAS = 44
TAMANHO_LINHA_DIGITAVEL = 47


def _validar(valor: str, tamanho: int) -> None:
    validar_entrada(valor, (tamanho,))
    if valor[0] == "8":
        raise InvalidCobrancaBarcodeError("iniciado por 8, use arrecadação")


def calcular_dv_campos(cod_barras: str):
    """DVs (módulo 10) dos três primeiros campos da linha digitável."""
    return (
        modulo10(cod_barras[0:4] + cod_barras[19:24]),
        modulo10(cod_barras[24:34]),
        modulo10(cod_barras[34:44]),
    )


class CodBarras(str):
    """Código de barras de cobrança com 44 dígitos, validado na criação."""

    def __new__(cls, valor: str):
        _validar(valor, TAMANHO_COD_BARRAS)
        return super().__new__(cls, valor)

    @classmethod
    def from_linha_digitavel(cls, linha: "LinhaDigitavel") -> "CodBarras":
        return cls(linha[0:4] + linha[32:47] + linha[4:9] + linha[10:20] + linha[21:31])

    @property
    def digito_verificador(self) -> int:
        return int(self[4])

    def calcular_dv(self) -> int:
        """DV geral: módulo 11 sobre todas as posições exceto a 4 (fallback 1)."""
        return modulo11_boleto(self[:4] + self[5:])

    def calcular_dv_campos(self):
        return calcular_dv_campos(self)

    def com_dv(self, dv: int) -> "CodBarras":
        """Retorna uma cópia com o DV geral substituído."""
        return CodBarras(self[:4] + str(dv) + self[5:])

    def __repr__(self):
        return f"CodBarras({str(self)!r})"


class LinhaDigitavel(str):
    """Linha digitável de cobrança com 47 dígitos, sem pontuação."""

    def __new__(cls, valor: str):
        _validar(valor, TAMANHO_LINHA_DIGITAVEL)
        return super().__new__(cls, valor)

    @classmethod
    def from_cod_barras(cls, cod_barras: CodBarras) -> "LinhaDigitavel":
        dv1, dv2, dv3 = calcular_dv_campos(cod_barras)
        return cls(
            cod_barras[0:4] + cod_barras[19:24] + str(dv1)
            + cod_barras[24:34] + str(dv2)
            + cod_barras[34:44] + str(dv3)
            + cod_barras[4]
            + cod_barras[5:19]
        )

    @property
    def dv_campos(self):
        return int(self[9]), int(self[20]), int(self[31])

    def formatada(self) -> str:
        """Linha no formato impresso: AAABC.CCCCX DDDDD.DDDDDY EEEEE.EEEEEZ K UUUUVVVVVVVVVV"""
        return (
            f"{self[0:5]}.{self[5:10]} {self[10:15]}.{self[15:21]} "
            f"{self[21:26]}.{self[26:32]} {self[32]} {self[33:47]}"
        )

    def __repr__(self):
        return f"LinhaDigitavel({str(self)!r})"


def cod_barras_para_linha_digitavel(cod_barras: str) -> str:
    return str(LinhaDigitavel.from_cod_barras(CodBarras(cod_barras)))


def linha_digitavel_para_cod_barras(linha: str) -> str:
    return str(CodBarras.from_linha_digitavel(LinhaDigitavel(linha)))
