"""Rotinas compartilhadas: cálculo de dígitos verificadores e fator de vencimento."""

import logging
import re
from datetime import date, datetime, timedelta
from decimal import Decimal
from itertools import cycle

from .errors import InvalidLengthError, NumbersOnlyError

logger = logging.getLogger(__name__)

APENAS_DIGITOS = re.compile(r"[0-9]+")
SEPARADORES = re.compile(r"[\s.\-]")

# Fator 1000 voltou a ser usado a partir de 22/02/2025, um dia depois do fator 9999.
DATA_BASE_FATOR = date(1997, 10, 7)
DATA_BASE_FATOR_NOVA = date(2022, 5, 29)
LIMITE_FATOR_NOVA_BASE = 4469


def normalizar_entrada(valor: str) -> str:
    """
    Remove espaços, pontos e hífens usados na formatação da linha digitável
    ("75691.43436 01033.723402 ..."). Letras e outros símbolos são mantidos
    para que a validação acuse ``NumbersOnly``.
    """
    return SEPARADORES.sub("", valor or "")


def como_texto(valor) -> str:
    """Aceita ``str`` ou ``bytes``; bytes são lidos em latin-1 (1 byte = 1 caractere)."""
    if isinstance(valor, (bytes, bytearray)):
        return bytes(valor).decode("latin-1")
    return valor


def _digitos(numero) -> str:
    """Aceita str, bytes ou qualquer iterável de caracteres numéricos."""
    if isinstance(numero, (bytes, bytearray)):
        return como_texto(numero)
    return "".join(numero)


def validar_entrada(valor: str, tamanhos) -> None:
    """
    Valida tamanho e conteúdo numérico, nessa ordem.
    O tamanho vem primeiro para que entradas de tamanho errado sejam sempre
    ``InvalidLength``, qualquer que seja o conteúdo.
    """
    if len(valor) not in tamanhos:
        raise InvalidLengthError(f"recebido {len(valor)}, esperado {' ou '.join(map(str, tamanhos))}")
    if not APENAS_DIGITOS.fullmatch(valor):
        raise NumbersOnlyError()


def modulo10(numero: str) -> int:
    """
    Calcula o dígito verificador pelo módulo 10.

    Pesos 2 e 1 alternados da direita para a esquerda; produtos com dois
    dígitos têm os dígitos somados. Sempre retorna um dígito de 0 a 9.
    """
    soma = 0
    multiplicador = 2
    for d in reversed(_digitos(numero)):
        prod = int(d) * multiplicador
        # se resultado tiver 2 dígitos, soma os dígitos
        if prod >= 10:
            prod = (prod // 10) + (prod % 10)
        soma += prod
        multiplicador = 1 if multiplicador == 2 else 2

    return (10 - soma % 10) % 10


def modulo11(numero: str):
    """
    Calcula o dígito verificador pelo módulo 11.

    Pesos de 2 a 9 (repetindo) da direita para a esquerda, sem somar os
    dígitos dos produtos. DV = 11 - (soma % 11).

    Retorna ``None`` quando o resultado é 10 ou 11: cada uso define o valor
    substituto (1 no DV geral da cobrança, 0 nos demais).
    """
    pesos = cycle(range(2, 10))
    soma = 0
    for digito, peso in zip(reversed(_digitos(numero)), pesos):
        soma += int(digito) * peso

    dv = 11 - (soma % 11)
    if dv in (10, 11):
        return None
    return dv


def modulo11_boleto(numero: str) -> int:
    """
    Calcula o dígito verificador geral do boleto de cobrança (módulo 11,
    padrão FEBRABAN): quando o módulo 11 não define dígito, utiliza-se '1'.
    """
    dv = modulo11(numero)
    return 1 if dv is None else dv


def modulo11_campo(numero: str) -> int:
    """Módulo 11 com '0' como substituto (campos da linha digitável e arrecadação)."""
    dv = modulo11(numero)
    return 0 if dv is None else dv


def fator_vencimento_para_data(fator: int):
    """
    Converte o fator de vencimento em data.

    Fator 0 indica boleto sem vencimento. Fatores a partir de 4469 contam da
    data base de 07/10/1997; fatores menores pertencem ao ciclo
    reiniciado em 22/02/2025 e contam de 29/05/2022.
    """
    if not fator:
        return None
    if fator >= LIMITE_FATOR_NOVA_BASE:
        return DATA_BASE_FATOR + timedelta(days=fator)
    return DATA_BASE_FATOR_NOVA + timedelta(days=fator)


def data_para_fator_vencimento(vencimento):
    """
    Converte uma data no fator de vencimento correspondente.
    Retorna None se a data não puder ser representada (antes de 01/01/2010
    ou depois do fim do ciclo atual).
    """
    if isinstance(vencimento, datetime):
        vencimento = vencimento.date()

    dias = (vencimento - DATA_BASE_FATOR).days
    if LIMITE_FATOR_NOVA_BASE <= dias <= 9999:
        return dias

    dias = (vencimento - DATA_BASE_FATOR_NOVA).days
    if 1000 <= dias < LIMITE_FATOR_NOVA_BASE:
        return dias

    logger.debug("Data %s fora do intervalo representável por fator de vencimento", vencimento)
    return None


def parse_valor(raw: str):
    """
    Converte um campo de valor com 2 casas decimais implícitas.
    Campo zerado significa "valor não informado" e retorna None.
    """
    centavos = int(raw)
    if not centavos:
        return None
    return Decimal(centavos) / 100
