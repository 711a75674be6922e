"""Decodificação de boletos de cobrança (bancários)."""

import logging
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from ..base import como_texto, fator_vencimento_para_data, parse_valor, validar_entrada
from ..diretorios import bancos_padrao
from ..errors import (
    InvalidCodigoMoedaError,
    InvalidDigitoVerificadorCamposError,
    InvalidDigitoVerificadorGeralError,
    InvalidFatorVencimentoError,
)
from .codigos import (
    TAMANHO_COD_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
    CodBarras,
    LinhaDigitavel,
)

logger = logging.getLogger(__name__)


class CodigoMoeda(Enum):
    REAL = "9"
    OUTRAS = "0"

    @property
    def descricao(self) -> str:
        return "Real" if self is CodigoMoeda.REAL else "Outras"


@dataclass(frozen=True)
class Cobranca:
    cod_barras: CodBarras
    linha_digitavel: LinhaDigitavel
    cod_banco: int
    nome_banco: Optional[str]
    cod_moeda: CodigoMoeda
    digito_verificador: int
    fator_vencimento: int
    data_vencimento: Optional[date]
    valor: Optional[Decimal]

    tipo = "cobranca"

    @classmethod
    def parse(cls, valor, bancos=None) -> "Cobranca":
        """
        Valida e decodifica um código de barras (44) ou linha digitável (47).

        ``bancos`` é qualquer objeto com ``por_id(codigo)``; por padrão usa a
        tabela de instituições carregada do diretório de dados.
        """
        valor = como_texto(valor)
        validar_entrada(valor, (TAMANHO_COD_BARRAS, TAMANHO_LINHA_DIGITAVEL))

        if len(valor) == TAMANHO_COD_BARRAS:
            cod_barras = CodBarras(valor)
            linha_digitavel = LinhaDigitavel.from_cod_barras(cod_barras)
        else:
            linha_digitavel = LinhaDigitavel(valor)
            cod_barras = CodBarras.from_linha_digitavel(linha_digitavel)

        cod_banco = int(cod_barras[0:3])

        try:
            cod_moeda = CodigoMoeda(cod_barras[3])
        except ValueError:
            raise InvalidCodigoMoedaError(f"'{cod_barras[3]}'") from None

        fator_vencimento = int(cod_barras[5:9])
        if 0 < fator_vencimento < 1000:
            raise InvalidFatorVencimentoError(str(fator_vencimento))

        dv = cod_barras.calcular_dv()
        if dv != cod_barras.digito_verificador:
            raise InvalidDigitoVerificadorGeralError(
                f"esperado {dv}, encontrado {cod_barras.digito_verificador}"
            )

        dvs = cod_barras.calcular_dv_campos()
        if dvs != linha_digitavel.dv_campos:
            raise InvalidDigitoVerificadorCamposError(
                "esperado {}, encontrado {}".format(
                    "/".join(map(str, dvs)), "/".join(map(str, linha_digitavel.dv_campos))
                )
            )

        if bancos is None:
            bancos = bancos_padrao()
        logger.debug("Cobrança decodificada: %s", cod_barras)

        return cls(
            cod_barras=cod_barras,
            linha_digitavel=linha_digitavel,
            cod_banco=cod_banco,
            nome_banco=bancos.por_id(cod_banco),
            cod_moeda=cod_moeda,
            digito_verificador=dv,
            fator_vencimento=fator_vencimento,
            data_vencimento=fator_vencimento_para_data(fator_vencimento),
            valor=parse_valor(cod_barras[9:19]),
        )

    @property
    def campo_livre(self) -> str:
        return self.cod_barras[19:44]

    def to_dict(self) -> dict:
        return {
            "tipo": self.tipo,
            "cod_barras": str(self.cod_barras),
            "linha_digitavel": str(self.linha_digitavel),
            "cod_banco": f"{self.cod_banco:03d}",
            "nome_banco": self.nome_banco,
            "cod_moeda": self.cod_moeda.descricao,
            "digito_verificador": self.digito_verificador,
            "data_vencimento": self.data_vencimento,
            "valor": self.valor,
        }
