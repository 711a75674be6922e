from flask import Flask, jsonify, render_template, request

from boleto_utils import config
from validador_boleto import (
    Boleto,
    BoletoError,
    normalizar_entrada,
    para_serializavel,
    validar_linha_digitavel_boleto,
)


app = Flask(__name__)
app.config["SECRET_KEY"] = config.SECRET_KEY


def _erro_json(erro: BoletoError):
    return jsonify({"erro": str(erro), "codigo": erro.codigo}), 422


@app.route("/")
def index():
    """
    Página inicial: formulário para informar o código de barras
    ou a linha digitável.
    """
    return render_template("index.html")


@app.route("/boleto", methods=["GET", "POST"])
def boleto():
    """
    Decodifica o boleto informado e devolve os dados extraídos
    (ou os erros encontrados) para a página boleto.html.
    """
    erros = []
    infos = {}
    codigo = ""

    if request.method == "POST":
        codigo = (request.form.get("codigo") or "").strip()
        erros, infos = validar_linha_digitavel_boleto(codigo)

    return render_template("boleto.html", erros=erros, infos=infos, codigo=codigo)


@app.route("/digito-verificador", methods=["POST"])
def digito_verificador():
    """
    Calcula os dígitos verificadores de um código ainda sem DV
    (os dígitos informados nas posições de DV são ignorados).
    """
    codigo = (request.form.get("codigo") or "").strip()
    erros = []
    digitos = None

    try:
        digitos = Boleto.calcular_digitos_verificadores(normalizar_entrada(codigo))
    except BoletoError as e:
        erros.append(f"{e}.")

    return render_template("boleto.html", erros=erros, infos={}, digitos=digitos, codigo=codigo)


@app.route("/api/boleto/<codigo>")
def api_boleto(codigo):
    try:
        boleto = Boleto.parse(normalizar_entrada(codigo))
    except BoletoError as e:
        return _erro_json(e)
    return jsonify(para_serializavel(boleto.to_dict()))


@app.route("/api/digito-verificador/<codigo>")
def api_digito_verificador(codigo):
    try:
        digitos = Boleto.calcular_digitos_verificadores(normalizar_entrada(codigo))
    except BoletoError as e:
        return _erro_json(e)
    return jsonify(digitos.to_dict())


if __name__ == "__main__":
    # debug=True é útil durante o desenvolvimento
    app.run(debug=True)
