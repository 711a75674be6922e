"""Erros de validação de boletos.

Todos herdam de ``BoletoError`` para que a linha de comando e a interface web
possam capturar qualquer falha de decodificação com um único ``except``.
Nenhum deles é transitório: indicam entrada malformada ou inconsistente.

Hierarquia:
    BoletoError
    ├── NumbersOnlyError
    ├── InvalidLengthError
    ├── InvalidCodigoMoedaError
    ├── InvalidDigitoVerificadorGeralError
    ├── InvalidDigitoVerificadorCamposError
    ├── InvalidDigitoVerificadorError
    ├── InvalidFatorVencimentoError
    ├── InvalidCobrancaBarcodeError
    ├── InvalidArrecadacaoBarcodeError
    ├── InvalidSegmentoError
    └── InvalidTipoValorError
"""


class BoletoError(ValueError):
    """Erro base. ``codigo`` identifica o tipo de erro de forma estável."""

    codigo = "BoletoError"
    mensagem = "boleto inválido"

    def __init__(self, detalhe: str = ""):
        self.detalhe = detalhe
        mensagem = self.mensagem
        if detalhe:
            mensagem += f" ({detalhe})"
        super().__init__(mensagem)


class NumbersOnlyError(BoletoError):
    codigo = "NumbersOnly"
    mensagem = "deve conter apenas números"


class InvalidLengthError(BoletoError):
    codigo = "InvalidLength"
    mensagem = "tamanho inválido"


class InvalidCodigoMoedaError(BoletoError):
    codigo = "InvalidCodigoMoeda"
    mensagem = "código moeda inválido"


class InvalidDigitoVerificadorGeralError(BoletoError):
    codigo = "InvalidDigitoVerificadorGeral"
    mensagem = "dígito verificador geral inválido"


class InvalidDigitoVerificadorCamposError(BoletoError):
    codigo = "InvalidDigitoVerificadorCampos"
    mensagem = "dígito verificador de campos inválido"


class InvalidDigitoVerificadorError(BoletoError):
    """Usado pela arrecadação tanto para o DV geral quanto para os DVs dos campos."""

    codigo = "InvalidDigitoVerificador"
    mensagem = "dígito verificador inválido"


class InvalidFatorVencimentoError(BoletoError):
    codigo = "InvalidFatorVencimento"
    mensagem = "fator de vencimento inválido"


class InvalidCobrancaBarcodeError(BoletoError):
    codigo = "InvalidCobrancaBarcode"
    mensagem = "código de barras de cobrança inválido"


class InvalidArrecadacaoBarcodeError(BoletoError):
    codigo = "InvalidArrecadacaoBarcode"
    mensagem = "código de barras de arrecadação inválido"


class InvalidSegmentoError(BoletoError):
    codigo = "InvalidSegmento"
    mensagem = "segmento inválido"


class InvalidTipoValorError(BoletoError):
    codigo = "InvalidTipoValor"
    mensagem = "tipo de valor inválido"
