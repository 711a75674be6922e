"""Segmentos e tipos de valor dos boletos de arrecadação."""

from enum import IntEnum

from ..errors import InvalidSegmentoError, InvalidTipoValorError


class Segmento(IntEnum):
    PREFEITURAS = 1
    SANEAMENTO = 2
    ENERGIA_ELETRICA_E_GAS = 3
    TELECOMUNICACOES = 4
    ORGAOS_GOVERNAMENTAIS = 5
    CARNES = 6
    MULTAS_TRANSITO = 7
    EXCLUSIVO_DO_BANCO = 9

    @classmethod
    def from_digito(cls, digito: str) -> "Segmento":
        try:
            return cls(int(digito))
        except ValueError:
            raise InvalidSegmentoError(f"'{digito}'") from None

    @property
    def descricao(self) -> str:
        return DESCRICOES_SEGMENTO[self]


DESCRICOES_SEGMENTO = {
    Segmento.PREFEITURAS: "Prefeituras",
    Segmento.SANEAMENTO: "Saneamento",
    Segmento.ENERGIA_ELETRICA_E_GAS: "Energia elétrica e gás",
    Segmento.TELECOMUNICACOES: "Telecomunicações",
    Segmento.ORGAOS_GOVERNAMENTAIS: "Órgãos governamentais",
    Segmento.CARNES: "Carnês",
    Segmento.MULTAS_TRANSITO: "Multas de trânsito",
    Segmento.EXCLUSIVO_DO_BANCO: "Uso exclusivo do banco emissor",
}


class TipoValor(IntEnum):
    """
    Identificação do valor: define se o campo de valor está em reais ou em
    quantidade de moeda, e qual módulo calcula todos os DVs do boleto.
    """

    VALOR_REAIS_MOD10 = 6
    QTDE_MOEDA_MOD10 = 7
    VALOR_REAIS_MOD11 = 8
    QTDE_MOEDA_MOD11 = 9

    @classmethod
    def from_digito(cls, digito: str) -> "TipoValor":
        try:
            return cls(int(digito))
        except ValueError:
            raise InvalidTipoValorError(f"'{digito}'") from None

    @property
    def modulo10(self) -> bool:
        return self in (TipoValor.VALOR_REAIS_MOD10, TipoValor.QTDE_MOEDA_MOD10)

    @property
    def em_reais(self) -> bool:
        return self in (TipoValor.VALOR_REAIS_MOD10, TipoValor.VALOR_REAIS_MOD11)

    @property
    def descricao(self) -> str:
        unidade = "Valor em reais" if self.em_reais else "Quantidade de moeda"
        return f"{unidade} (módulo {10 if self.modulo10 else 11})"
