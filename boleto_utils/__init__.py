"""Decodificação e validação de boletos de cobrança e arrecadação."""
from .errors import (
    BoletoError,
    NumbersOnlyError,
    InvalidLengthError,
    InvalidCodigoMoedaError,
    InvalidDigitoVerificadorGeralError,
    InvalidDigitoVerificadorCamposError,
    InvalidDigitoVerificadorError,
    InvalidFatorVencimentoError,
    InvalidCobrancaBarcodeError,
    InvalidArrecadacaoBarcodeError,
    InvalidSegmentoError,
    InvalidTipoValorError
)

from .base import (
    normalizar_entrada,
    modulo10,
    modulo11,
    modulo11_boleto,
    fator_vencimento_para_data,
    data_para_fator_vencimento
)

from .diretorios import (
    DiretorioBancos,
    DiretorioConvenios
)

from .cobranca import (
    Cobranca,
    CobrancaBuilder,
    CodigoMoeda
)

from .arrecadacao import (
    Arrecadacao,
    Convenio,
    Segmento,
    TipoValor
)

from .boleto import (
    Boleto,
    DigitosVerificadores,
    parse_boleto,
    validar_linha_digitavel_boleto
)

from .formatos import (
    formatar_texto,
    formatar_digitos_texto,
    formatar_json,
    formatar_yaml,
    para_serializavel
)

__all__ = [
    "BoletoError",
    "NumbersOnlyError",
    "InvalidLengthError",
    "InvalidCodigoMoedaError",
    "InvalidDigitoVerificadorGeralError",
    "InvalidDigitoVerificadorCamposError",
    "InvalidDigitoVerificadorError",
    "InvalidFatorVencimentoError",
    "InvalidCobrancaBarcodeError",
    "InvalidArrecadacaoBarcodeError",
    "InvalidSegmentoError",
    "InvalidTipoValorError",
    "normalizar_entrada",
    "modulo10",
    "modulo11",
    "modulo11_boleto",
    "fator_vencimento_para_data",
    "data_para_fator_vencimento",
    "DiretorioBancos",
    "DiretorioConvenios",
    "Cobranca",
    "CobrancaBuilder",
    "CodigoMoeda",
    "Arrecadacao",
    "Convenio",
    "Segmento",
    "TipoValor",
    "Boleto",
    "DigitosVerificadores",
    "parse_boleto",
    "validar_linha_digitavel_boleto",
    "formatar_texto",
    "formatar_digitos_texto",
    "formatar_json",
    "formatar_yaml",
    "para_serializavel",
]
