"""Decodificação de boletos de arrecadação (concessionárias e tributos)."""

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..base import como_texto, parse_valor, validar_entrada
from ..diretorios import convenios_padrao
from ..errors import InvalidDigitoVerificadorError
from .codigos import (
    TAMANHO_COD_BARRAS,
    TAMANHO_LINHA_DIGITAVEL,
    CodBarras,
    LinhaDigitavel,
)
from .tipos import Segmento, TipoValor

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Convenio:
    """
    Identificação da empresa/órgão.

    Em carnês o campo é um identificador de 8 dígitos (parte do CNPJ) sem
    cadastro disponível, então ``carne`` fica True e ``nome`` é sempre None.
    """

    codigo: str
    nome: Optional[str] = None
    carne: bool = False


@dataclass(frozen=True)
class Arrecadacao:
    cod_barras: CodBarras
    linha_digitavel: LinhaDigitavel
    segmento: Segmento
    tipo_valor: TipoValor
    digito_verificador: int
    valor: Optional[Decimal]
    convenio: Convenio

    tipo = "arrecadacao"

    @classmethod
    def parse(cls, valor, convenios=None) -> "Arrecadacao":
        """
        Valida e decodifica um código de barras (44) ou linha digitável (48).

        O tipo de valor (3º dígito) define o módulo de todos os DVs, inclusive
        o geral. ``convenios`` é qualquer objeto com ``por_id(segmento, codigo)``.
        """
        valor = como_texto(valor)
        validar_entrada(valor, (TAMANHO_COD_BARRAS, TAMANHO_LINHA_DIGITAVEL))

        if len(valor) == TAMANHO_COD_BARRAS:
            cod_barras = CodBarras(valor)
            linha_digitavel = LinhaDigitavel.from_cod_barras(cod_barras)
        else:
            linha_digitavel = LinhaDigitavel(valor)
            cod_barras = CodBarras.from_linha_digitavel(linha_digitavel)

        tipo_valor = cod_barras.tipo_valor
        segmento = Segmento.from_digito(cod_barras[1])

        if segmento is Segmento.CARNES:
            convenio = Convenio(codigo=cod_barras[15:23], carne=True)
        else:
            if convenios is None:
                convenios = convenios_padrao()
            codigo = cod_barras[15:19]
            convenio = Convenio(codigo=codigo, nome=convenios.por_id(segmento, int(codigo)))

        dv = cod_barras.calcular_dv()
        if dv != cod_barras.digito_verificador:
            raise InvalidDigitoVerificadorError(
                f"geral: esperado {dv}, encontrado {cod_barras.digito_verificador}"
            )

        dvs = cod_barras.calcular_dv_campos()
        if dvs != linha_digitavel.dv_campos:
            raise InvalidDigitoVerificadorError(
                "campos: esperado {}, encontrado {}".format(
                    "/".join(map(str, dvs)), "/".join(map(str, linha_digitavel.dv_campos))
                )
            )

        logger.debug("Arrecadação decodificada: %s", cod_barras)

        return cls(
            cod_barras=cod_barras,
            linha_digitavel=linha_digitavel,
            segmento=segmento,
            tipo_valor=tipo_valor,
            digito_verificador=dv,
            valor=parse_valor(cod_barras[4:15]) if tipo_valor.em_reais else None,
            convenio=convenio,
        )

    def to_dict(self) -> dict:
        return {
            "tipo": self.tipo,
            "cod_barras": str(self.cod_barras),
            "linha_digitavel": str(self.linha_digitavel),
            "segmento": self.segmento.descricao,
            "tipo_valor": self.tipo_valor.descricao,
            "digito_verificador": self.digito_verificador,
            "valor": self.valor,
            "convenio": {
                "codigo": self.convenio.codigo,
                "nome": self.convenio.nome,
                "carne": self.convenio.carne,
            },
        }
