"""Código de barras e linha digitável de boletos de arrecadação.

Posições (índices Python):

    Código de barras (44)
    00000000001   11111111122   22222222333   33333334444
    01234567890   12345678901   23456789012   34567890123
    ABCDEEEEEEE   EEEEFFFFGGG   GGGGGGGGGGG   GGGGGGGGGGG

    Linha digitável (48)
    00000000001-1 11111111222-2 22222233333-3 33334444444-4
    01234567890-1 23456789012-3 45678901234-5 67890123456-7
    ABCDEEEEEEE-W EEEEFFFFGGG-X GGGGGGGGGGG-Y GGGGGGGGGGG-Z

    A = '8', B = segmento, C = tipo de valor, D = DV geral, E = valor,
    F = convênio (FFFFFFFF em carnês), G = campo livre, W/X/Y/Z = DVs.
"""

from ..base import modulo10, modulo11_campo, validar_entrada
from ..errors import InvalidArrecadacaoBarcodeError
from .tipos import TipoValor

TAMANHO_COD_BARRAS = 44
TAMANHO_LINHA_DIGITAVEL = 48


def _validar(valor: str, tamanho: int) -> None:
    validar_entrada(valor, (tamanho,))
    if valor[0] != "8":
        raise InvalidArrecadacaoBarcodeError("deve iniciar por 8")


def calcular_dv(numero: str, tipo_valor: TipoValor) -> int:
    """Módulo 10 ou 11 conforme o tipo de valor; no módulo 11 o substituto é 0."""
    if tipo_valor.modulo10:
        return modulo10(numero)
    return modulo11_campo(numero)


class CodBarras(str):
    """Código de barras de arrecadação com 44 dígitos e tipo de valor válido."""

    def __new__(cls, valor: str):
        _validar(valor, TAMANHO_COD_BARRAS)
        TipoValor.from_digito(valor[2])
        return super().__new__(cls, valor)

    @classmethod
    def from_linha_digitavel(cls, linha: "LinhaDigitavel") -> "CodBarras":
        return cls(linha[0:11] + linha[12:23] + linha[24:35] + linha[36:47])

    @property
    def tipo_valor(self) -> TipoValor:
        return TipoValor.from_digito(self[2])

    @property
    def digito_verificador(self) -> int:
        return int(self[3])

    def calcular_dv(self) -> int:
        """DV geral sobre todas as posições exceto a 3."""
        return calcular_dv(self[:3] + self[4:], self.tipo_valor)

    def calcular_dv_campos(self):
        tipo_valor = self.tipo_valor
        return tuple(calcular_dv(self[i:i + 11], tipo_valor) for i in range(0, 44, 11))

    def com_dv(self, dv: int) -> "CodBarras":
        return CodBarras(self[:3] + str(dv) + self[4:])

    def __repr__(self):
        return f"CodBarras({str(self)!r})"


class LinhaDigitavel(str):
    """Linha digitável de arrecadação: 4 blocos de 11 dígitos + DV."""

    def __new__(cls, valor: str):
        _validar(valor, TAMANHO_LINHA_DIGITAVEL)
        return super().__new__(cls, valor)

    @classmethod
    def from_cod_barras(cls, cod_barras: CodBarras) -> "LinhaDigitavel":
        dvs = cod_barras.calcular_dv_campos()
        blocos = [cod_barras[i * 11:(i + 1) * 11] + str(dv) for i, dv in enumerate(dvs)]
        return cls("".join(blocos))

    @property
    def dv_campos(self):
        return tuple(int(self[i]) for i in (11, 23, 35, 47))

    def formatada(self) -> str:
        """Linha no formato impresso: 4 blocos "NNNNNNNNNNN-D"."""
        return " ".join(f"{self[i:i + 11]}-{self[i + 11]}" for i in range(0, 48, 12))

    def __repr__(self):
        return f"LinhaDigitavel({str(self)!r})"


def cod_barras_para_linha_digitavel(cod_barras: str) -> str:
    return str(LinhaDigitavel.from_cod_barras(CodBarras(cod_barras)))


def linha_digitavel_para_cod_barras(linha: str) -> str:
    return str(CodBarras.from_linha_digitavel(LinhaDigitavel(linha)))
