from decimal import Decimal

import pytest

from boleto_utils.arrecadacao import (
    Arrecadacao,
    CodBarras,
    Convenio,
    LinhaDigitavel,
    Segmento,
    TipoValor,
    cod_barras_para_linha_digitavel,
    linha_digitavel_para_cod_barras,
)
from boleto_utils.errors import (
    InvalidArrecadacaoBarcodeError,
    InvalidDigitoVerificadorError,
    InvalidLengthError,
    InvalidSegmentoError,
    InvalidTipoValorError,
    NumbersOnlyError,
)

PREFEITURA_COD_BARRAS = "81675555555555566667777777777777777777777777"
PREFEITURA_LINHA = "816755555553555566667773777777777775777777777775"


class ConveniosFixos:
    def __init__(self, nomes):
        self.nomes = nomes

    def por_id(self, segmento, codigo):
        return self.nomes.get((segmento, codigo))


@pytest.mark.parametrize(
    "cod_barras, linha",
    [
        (PREFEITURA_COD_BARRAS, PREFEITURA_LINHA),
        (
            "83800000001234500480000000000000000000000000",
            "838000000017234500480009000000000000000000000000",
        ),
        (
            "84850000002500012340000000000000000000000000",
            "848500000021500012340008000000000000000000000000",
        ),
        (
            "81960000000500013190000000000000000000000000",
            "819600000003500013190000000000000000000000000000",
        ),
        (
            "86720000000999912345678000000000000000000000",
            "867200000000999912345678800000000003000000000000",
        ),
    ],
)
def test_conversao_cod_barras_linha_digitavel(cod_barras, linha):
    assert cod_barras_para_linha_digitavel(cod_barras) == linha
    assert linha_digitavel_para_cod_barras(linha) == cod_barras


def test_linha_digitavel_formatada():
    linha = LinhaDigitavel(PREFEITURA_LINHA)
    assert linha.formatada() == "81675555555-3 55556666777-3 77777777777-5 77777777777-5"
    assert linha.dv_campos == (3, 3, 5, 5)


def test_cod_barras_dvs():
    cod_barras = CodBarras(PREFEITURA_COD_BARRAS)
    assert cod_barras.tipo_valor is TipoValor.VALOR_REAIS_MOD10
    assert cod_barras.digito_verificador == 7
    assert cod_barras.calcular_dv() == 7
    assert cod_barras.calcular_dv_campos() == (3, 3, 5, 5)


def test_parse_prefeitura():
    boleto = Arrecadacao.parse(PREFEITURA_COD_BARRAS)

    assert boleto.tipo == "arrecadacao"
    assert boleto.linha_digitavel == PREFEITURA_LINHA
    assert boleto.segmento is Segmento.PREFEITURAS
    assert boleto.tipo_valor is TipoValor.VALOR_REAIS_MOD10
    assert boleto.digito_verificador == 7
    assert boleto.valor == Decimal("555555555.55")
    assert boleto.convenio == Convenio(codigo="6666")


def test_parse_linha_digitavel_equivale_ao_cod_barras():
    assert Arrecadacao.parse(PREFEITURA_LINHA) == Arrecadacao.parse(PREFEITURA_COD_BARRAS)


def test_parse_modulo11_em_reais():
    boleto = Arrecadacao.parse("838000000017234500480009000000000000000000000000")

    assert boleto.segmento is Segmento.ENERGIA_ELETRICA_E_GAS
    assert boleto.tipo_valor is TipoValor.VALOR_REAIS_MOD11
    assert boleto.digito_verificador == 0
    assert boleto.valor == Decimal("123.45")
    assert boleto.convenio == Convenio(codigo="0048")


def test_parse_convenio_cadastrado():
    boleto = Arrecadacao.parse("81960000000500013190000000000000000000000000")

    assert boleto.tipo_valor is TipoValor.QTDE_MOEDA_MOD11
    assert boleto.valor is None
    assert boleto.convenio.codigo == "1319"
    assert boleto.convenio.nome == "Prefeitura Municipal de Curitiba - PR"


def test_parse_carne():
    boleto = Arrecadacao.parse("86720000000999912345678000000000000000000000")

    assert boleto.segmento is Segmento.CARNES
    assert boleto.tipo_valor is TipoValor.QTDE_MOEDA_MOD10
    assert boleto.valor is None
    assert boleto.convenio == Convenio(codigo="12345678", carne=True)


def test_parse_saneamento():
    boleto = Arrecadacao.parse("826500000011000055550008000000000000000000000000")
    assert boleto.segmento is Segmento.SANEAMENTO
    assert boleto.valor == Decimal("100.00")


def test_parse_usa_diretorio_informado():
    convenios = ConveniosFixos({(Segmento.PREFEITURAS, 6666): "Prefeitura Teste"})
    boleto = Arrecadacao.parse(PREFEITURA_COD_BARRAS, convenios=convenios)
    assert boleto.convenio.nome == "Prefeitura Teste"


@pytest.mark.parametrize(
    "valor, erro",
    [
        ("81685555555555566667777777777777777777777777", InvalidDigitoVerificadorError),
        ("816755555553555566667773777777777775777777777776", InvalidDigitoVerificadorError),
        ("816755555554555566667773777777777775777777777775", InvalidDigitoVerificadorError),
        ("81575555555555566667777777777777777777777777", InvalidTipoValorError),
        ("80675555555555566667777777777777777777777777", InvalidSegmentoError),
        ("88675555555555566667777777777777777777777777", InvalidSegmentoError),
        ("7" * 44, InvalidArrecadacaoBarcodeError),
        ("A" * 44, NumbersOnlyError),
        ("8" * 47, InvalidLengthError),
        ("8" * 45, InvalidLengthError),
    ],
)
def test_parse_erros(valor, erro):
    with pytest.raises(erro):
        Arrecadacao.parse(valor)


def test_to_dict():
    dados = Arrecadacao.parse("86720000000999912345678000000000000000000000").to_dict()
    assert dados == {
        "tipo": "arrecadacao",
        "cod_barras": "86720000000999912345678000000000000000000000",
        "linha_digitavel": "867200000000999912345678800000000003000000000000",
        "segmento": "Carnês",
        "tipo_valor": "Quantidade de moeda (módulo 10)",
        "digito_verificador": 2,
        "valor": None,
        "convenio": {"codigo": "12345678", "nome": None, "carne": True},
    }


@pytest.mark.parametrize(
    "tipo_valor, modulo10, em_reais",
    [
        (TipoValor.VALOR_REAIS_MOD10, True, True),
        (TipoValor.QTDE_MOEDA_MOD10, True, False),
        (TipoValor.VALOR_REAIS_MOD11, False, True),
        (TipoValor.QTDE_MOEDA_MOD11, False, False),
    ],
)
def test_tipo_valor(tipo_valor, modulo10, em_reais):
    assert tipo_valor.modulo10 is modulo10
    assert tipo_valor.em_reais is em_reais


def test_segmento_descricao():
    assert Segmento.from_digito("1").descricao == "Prefeituras"
    assert Segmento.from_digito("9") is Segmento.EXCLUSIVO_DO_BANCO
    with pytest.raises(InvalidSegmentoError):
        Segmento.from_digito("8")


def test_parse_modulo11_telecomunicacoes():
    boleto = Arrecadacao.parse("84850000002500012340000000000000000000000000")
    assert boleto.segmento is Segmento.TELECOMUNICACOES
    assert boleto.digito_verificador == 5
    assert boleto.valor == Decimal("250.00")
    assert boleto.convenio == Convenio(codigo="1234")
