"""Montagem de boletos de cobrança a partir dos dados do título."""

import logging
from decimal import ROUND_DOWN, Decimal, InvalidOperation

from ..base import APENAS_DIGITOS, data_para_fator_vencimento
from .codigos import CodBarras
from .registro import Cobranca, CodigoMoeda

logger = logging.getLogger(__name__)

VALOR_MAXIMO_CENTAVOS = 9_999_999_999


class CobrancaBuilder:
    """
    Acumula os dados do boleto e gera um ``Cobranca`` com DV calculado.

    Banco e moeda são obrigatórios; valor, vencimento e campo livre são
    opcionais (zerados quando ausentes).

        >>> boleto = (CobrancaBuilder()
        ...           .cod_banco(301)
        ...           .cod_moeda(CodigoMoeda.REAL)
        ...           .valor(Decimal("99999999.99"))
        ...           .data_vencimento(date(2023, 7, 29))
        ...           .build())
        >>> str(boleto.cod_barras)
        '30198942699999999990000000000000000000000000'
    """

    def __init__(self):
        self._cod_banco = None
        self._cod_moeda = None
        self._data_vencimento = None
        self._valor = None
        self._campo_livre = "0" * 25

    def cod_banco(self, cod_banco: int) -> "CobrancaBuilder":
        cod_banco = int(cod_banco)
        if not 0 <= cod_banco <= 999:
            raise ValueError(f"Código do banco deve ter até 3 dígitos: {cod_banco}")
        self._cod_banco = cod_banco
        return self

    def cod_moeda(self, cod_moeda: CodigoMoeda) -> "CobrancaBuilder":
        self._cod_moeda = CodigoMoeda(cod_moeda)
        return self

    def data_vencimento(self, data_vencimento) -> "CobrancaBuilder":
        self._data_vencimento = data_vencimento
        return self

    def valor(self, valor) -> "CobrancaBuilder":
        # float passa por str para não herdar a imprecisão binária (99999999.99 * 100)
        try:
            valor = Decimal(str(valor)) if isinstance(valor, float) else Decimal(valor)
        except InvalidOperation:
            raise ValueError(f"Valor não numérico: {valor!r}") from None
        if not valor.is_finite():
            raise ValueError(f"Valor não numérico: {valor}")
        centavos = int((valor * 100).to_integral_value(rounding=ROUND_DOWN))
        if not 0 <= centavos <= VALOR_MAXIMO_CENTAVOS:
            raise ValueError(f"Valor fora do intervalo aceito pelo código de barras: {valor}")
        self._valor = centavos
        return self

    def campo_livre(self, campo_livre: str) -> "CobrancaBuilder":
        if len(campo_livre) != 25 or not APENAS_DIGITOS.fullmatch(campo_livre):
            raise ValueError("Campo livre deve conter exatamente 25 dígitos")
        self._campo_livre = campo_livre
        return self

    def build(self, bancos=None) -> Cobranca:
        faltando = [
            nome
            for nome, valor in (("cod_banco", self._cod_banco), ("cod_moeda", self._cod_moeda))
            if valor is None
        ]
        if faltando:
            raise ValueError(f"Campos obrigatórios não informados: {', '.join(faltando)}")

        fator = 0
        if self._data_vencimento is not None:
            fator = data_para_fator_vencimento(self._data_vencimento)
            if fator is None:
                logger.warning(
                    "Vencimento %s não representável; boleto gerado sem vencimento",
                    self._data_vencimento,
                )
                fator = 0

        sem_dv = CodBarras(
            f"{self._cod_banco:03d}"
            + self._cod_moeda.value
            + "0"
            + f"{fator:04d}"
            + f"{self._valor or 0:010d}"
            + self._campo_livre
        )
        cod_barras = sem_dv.com_dv(sem_dv.calcular_dv())

        return Cobranca.parse(str(cod_barras), bancos=bancos)
