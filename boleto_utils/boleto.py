"""Ponto de entrada: identifica o tipo de boleto pelo primeiro dígito."""

import logging
from dataclasses import dataclass

from . import arrecadacao, cobranca
from .base import como_texto, normalizar_entrada
from .errors import BoletoError, InvalidLengthError

logger = logging.getLogger(__name__)


def _eh_arrecadacao(valor: str) -> bool:
    if not valor:
        raise InvalidLengthError("entrada vazia")
    return valor[0] == "8"


@dataclass(frozen=True)
class DigitosVerificadores:
    """Resultado do cálculo de DVs, com os códigos já corrigidos."""

    tipo: str
    digito_verificador: int
    dv_campos: tuple
    cod_barras: str
    linha_digitavel: str

    def to_dict(self) -> dict:
        return {
            "tipo": self.tipo,
            "digito_verificador": self.digito_verificador,
            "dv_campos": list(self.dv_campos),
            "cod_barras": self.cod_barras,
            "linha_digitavel": self.linha_digitavel,
        }


class Boleto:
    """Despacha para cobrança ou arrecadação ('8' no primeiro dígito)."""

    @staticmethod
    def parse(valor, bancos=None, convenios=None):
        """
        Decodifica um código de barras ou linha digitável.
        Retorna ``Cobranca`` ou ``Arrecadacao``; ``tipo`` identifica qual.
        """
        valor = como_texto(valor)
        if _eh_arrecadacao(valor):
            return arrecadacao.Arrecadacao.parse(valor, convenios=convenios)
        return cobranca.Cobranca.parse(valor, bancos=bancos)

    @staticmethod
    def calcular_digitos_verificadores(valor) -> DigitosVerificadores:
        """
        Calcula o DV geral e os DVs dos campos validando apenas tamanho,
        dígitos e tipo (e o tipo de valor, na arrecadação). Os DVs informados
        na entrada são ignorados, de modo que zeros servem de marcador.
        """
        valor = como_texto(valor)
        if _eh_arrecadacao(valor):
            modulo, tipo = arrecadacao, arrecadacao.Arrecadacao.tipo
        else:
            modulo, tipo = cobranca, cobranca.Cobranca.tipo

        if len(valor) == modulo.TAMANHO_COD_BARRAS:
            cod_barras = modulo.CodBarras(valor)
        else:
            cod_barras = modulo.CodBarras.from_linha_digitavel(modulo.LinhaDigitavel(valor))

        dv = cod_barras.calcular_dv()
        cod_barras = cod_barras.com_dv(dv)
        linha_digitavel = modulo.LinhaDigitavel.from_cod_barras(cod_barras)

        return DigitosVerificadores(
            tipo=tipo,
            digito_verificador=dv,
            dv_campos=linha_digitavel.dv_campos,
            cod_barras=str(cod_barras),
            linha_digitavel=str(linha_digitavel),
        )

    @staticmethod
    def calcular_digito_verificador(valor) -> int:
        return Boleto.calcular_digitos_verificadores(valor).digito_verificador


def parse_boleto(valor, bancos=None, convenios=None):
    return Boleto.parse(valor, bancos=bancos, convenios=convenios)


def validar_linha_digitavel_boleto(linha: str):
    """
    Valida uma linha digitável ou código de barras (cobrança ou arrecadação).

    Retorna (erros, infos), onde:
      - erros: lista de mensagens de erro (DV incorreto, tamanho, etc.)
      - infos: dicionário com dados extraídos (banco, valor, vencimento, etc.)
    """
    erros = []
    infos = {}

    try:
        boleto = Boleto.parse(normalizar_entrada(linha))
    except BoletoError as e:
        logger.info("Boleto rejeitado: %s", e)
        erros.append(f"{e}.")
        return erros, infos

    infos = boleto.to_dict()
    if getattr(boleto, "data_vencimento", None):
        infos["vencimento"] = boleto.data_vencimento.strftime("%d/%m/%Y")
    if boleto.valor is not None:
        infos["valor_reais"] = float(boleto.valor)
    infos["linha_digitavel_formatada"] = boleto.linha_digitavel.formatada()

    return erros, infos
