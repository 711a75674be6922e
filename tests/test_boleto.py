import pytest

from boleto_utils import (
    Arrecadacao,
    Boleto,
    Cobranca,
    InvalidLengthError,
    NumbersOnlyError,
    parse_boleto,
    validar_linha_digitavel_boleto,
)


@pytest.mark.parametrize(
    "valor, classe",
    [
        ("11191444455555555556666666666666666666666666", Cobranca),
        ("75691434360103372340200149330011690380000250000", Cobranca),
        ("81675555555555566667777777777777777777777777", Arrecadacao),
        ("816755555553555566667773777777777775777777777775", Arrecadacao),
    ],
)
def test_parse_identifica_tipo(valor, classe):
    boleto = Boleto.parse(valor)
    assert isinstance(boleto, classe)
    assert parse_boleto(valor.encode()) == boleto


@pytest.mark.parametrize("valor", ["A" * 44, "8" + "A" * 43])
def test_apenas_numeros(valor):
    with pytest.raises(NumbersOnlyError):
        Boleto.parse(valor)


@pytest.mark.parametrize("tamanho", [43, 45, 46, 49])
@pytest.mark.parametrize("primeiro", ["0", "8"])
def test_tamanho_invalido(tamanho, primeiro):
    with pytest.raises(InvalidLengthError):
        Boleto.parse(primeiro * tamanho)


def test_entrada_vazia():
    with pytest.raises(InvalidLengthError):
        Boleto.parse("")


@pytest.mark.parametrize(
    "valor, tipo, dv, dv_campos, cod_barras, linha",
    [
        (
            "81605555555555566667777777777777777777777777",
            "arrecadacao",
            7,
            (3, 3, 5, 5),
            "81675555555555566667777777777777777777777777",
            "816755555553555566667773777777777775777777777775",
        ),
        (
            "816055555550555566667770777777777770777777777770",
            "arrecadacao",
            7,
            (3, 3, 5, 5),
            "81675555555555566667777777777777777777777777",
            "816755555553555566667773777777777775777777777775",
        ),
        (
            "75690903800002500001434301033723400014933001",
            "cobranca",
            6,
            (6, 2, 6),
            "75696903800002500001434301033723400014933001",
            "75691434360103372340200149330011690380000250000",
        ),
        (
            "75691434300103372340000149330010090380000250000",
            "cobranca",
            6,
            (6, 2, 6),
            "75696903800002500001434301033723400014933001",
            "75691434360103372340200149330011690380000250000",
        ),
    ],
)
def test_calcular_digitos_verificadores(valor, tipo, dv, dv_campos, cod_barras, linha):
    resultado = Boleto.calcular_digitos_verificadores(valor)

    assert resultado.tipo == tipo
    assert resultado.digito_verificador == dv
    assert resultado.dv_campos == dv_campos
    assert resultado.cod_barras == cod_barras
    assert resultado.linha_digitavel == linha
    assert Boleto.calcular_digito_verificador(valor) == dv


def test_calcular_digitos_verificadores_nao_valida_moeda():
    resultado = Boleto.calcular_digitos_verificadores("11111444455555555556666666666666666666666666")
    assert resultado.digito_verificador == 7
    assert resultado.linha_digitavel == "11116666636666666666566666666665744445555555555"


def test_calcular_digitos_verificadores_valida_tamanho():
    with pytest.raises(InvalidLengthError):
        Boleto.calcular_digitos_verificadores("0" * 45)


def test_validar_linha_digitavel_boleto():
    erros, infos = validar_linha_digitavel_boleto(
        "75691.43436 01033.723402 00149.330011 6 90380000250000"
    )

    assert erros == []
    assert infos["tipo"] == "cobranca"
    assert infos["cod_banco"] == "756"
    assert infos["vencimento"] == "06/07/2022"
    assert infos["valor_reais"] == 2500.0
    assert infos["linha_digitavel_formatada"] == "75691.43436 01033.723402 00149.330011 6 90380000250000"


def test_validar_linha_digitavel_boleto_arrecadacao():
    erros, infos = validar_linha_digitavel_boleto("81675555555-3 55556666777-3 77777777777-5 77777777777-5")

    assert erros == []
    assert infos["tipo"] == "arrecadacao"
    assert "vencimento" not in infos
    assert infos["valor_reais"] == 555555555.55


@pytest.mark.parametrize(
    "linha, mensagem",
    [
        ("123", "tamanho inválido (recebido 3, esperado 44 ou 47)."),
        ("", "tamanho inválido (entrada vazia)."),
        (
            "11192444455555555556666666666666666666666666",
            "dígito verificador geral inválido (esperado 1, encontrado 2).",
        ),
    ],
)
def test_validar_linha_digitavel_boleto_erros(linha, mensagem):
    erros, infos = validar_linha_digitavel_boleto(linha)
    assert erros == [mensagem]
    assert infos == {}
