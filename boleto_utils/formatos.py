"""Apresentação dos boletos decodificados: texto, JSON e YAML."""

import json
from datetime import date
from decimal import Decimal

import yaml


def _valor_br(valor) -> str:
    """Formata Decimal no padrão brasileiro: 1.234,56"""
    texto = f"{valor:,.2f}"
    return texto.replace(",", "_").replace(".", ",").replace("_", ".")


def _linhas(pares):
    largura = max(len(rotulo) for rotulo, _ in pares)
    return "\n".join(f"{rotulo.rjust(largura)}: {valor}" for rotulo, valor in pares)


def formatar_texto(boleto) -> str:
    pares = [
        ("Tipo", "Arrecadação" if boleto.tipo == "arrecadacao" else "Cobrança"),
        ("Código de barras", boleto.cod_barras),
        ("Linha digitável", boleto.linha_digitavel.formatada()),
    ]

    if boleto.tipo == "cobranca":
        banco = f"{boleto.cod_banco:03d}"
        if boleto.nome_banco:
            banco += f" - {boleto.nome_banco}"
        pares += [
            ("Banco", banco),
            ("Moeda", boleto.cod_moeda.descricao),
            ("Valor", _valor_br(boleto.valor) if boleto.valor is not None else "Sem valor"),
            (
                "Data Vencimento",
                boleto.data_vencimento.strftime("%d/%m/%Y")
                if boleto.data_vencimento
                else "Sem vencimento",
            ),
        ]
    else:
        convenio = boleto.convenio
        if convenio.carne:
            descricao_convenio = f"{convenio.codigo} (carnê)"
        elif convenio.nome:
            descricao_convenio = f"{convenio.codigo} - {convenio.nome}"
        else:
            descricao_convenio = f"{convenio.codigo} (não cadastrado)"
        pares += [
            ("Segmento", boleto.segmento.descricao),
            ("Tipo valor", boleto.tipo_valor.descricao),
            (
                "Valor",
                _valor_br(boleto.valor) if boleto.valor is not None else "Sem valor informado",
            ),
            ("Convênio", descricao_convenio),
        ]

    pares.append(("DV geral", boleto.digito_verificador))
    return _linhas(pares)


def formatar_digitos_texto(resultado) -> str:
    return _linhas([
        ("DV geral", resultado.digito_verificador),
        ("DV campos", " | ".join(str(dv) for dv in resultado.dv_campos)),
        ("Código de barras", resultado.cod_barras),
        ("Linha digitável", resultado.linha_digitavel),
    ])


def para_serializavel(valor):
    if isinstance(valor, dict):
        return {chave: para_serializavel(v) for chave, v in valor.items()}
    if isinstance(valor, (list, tuple)):
        return [para_serializavel(v) for v in valor]
    if isinstance(valor, Decimal):
        return float(valor)
    if isinstance(valor, date):
        return valor.isoformat()
    return valor


def formatar_json(dados: dict) -> str:
    return json.dumps(para_serializavel(dados), indent=2, ensure_ascii=False)


def formatar_yaml(dados: dict) -> str:
    return yaml.safe_dump(para_serializavel(dados), allow_unicode=True, sort_keys=False)


FORMATOS = {
    "json": formatar_json,
    "yaml": formatar_yaml,
}
