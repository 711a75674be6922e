"""
Cadastros de referência: instituições bancárias e convênios de arrecadação.

As tabelas são lidas uma única vez de arquivos CSV no diretório de dados e
ficam somente para leitura. A ausência de um código nunca é erro: a consulta
apenas retorna None.
"""

import csv
import logging
import threading
from pathlib import Path

from . import config

logger = logging.getLogger(__name__)

ARQUIVO_BANCOS = "instituicoes-bancarias.csv"

# segmento (dígito) -> arquivo com os convênios daquele segmento.
# Os demais segmentos não têm cadastro público e sempre resultam em "desconhecido".
ARQUIVOS_CONVENIOS = {
    1: "concessionarias-1-prefeituras.csv",
}


def _ler_tabela(caminho: Path, coluna_id: str, coluna_nome: str) -> dict:
    if not caminho.is_file():
        logger.warning("Tabela de referência não encontrada: %s", caminho)
        return {}

    tabela = {}
    with open(caminho, "r", encoding="utf-8", newline="") as f:
        for numero_linha, registro in enumerate(csv.DictReader(f), start=2):
            codigo = (registro.get(coluna_id) or "").strip()
            nome = (registro.get(coluna_nome) or "").strip()
            if not codigo.isdigit() or not nome:
                logger.warning("%s, linha %d: registro ignorado", caminho.name, numero_linha)
                continue
            tabela[int(codigo)] = nome

    logger.info("Carregados %d registros de %s", len(tabela), caminho.name)
    return tabela


class DiretorioBancos:
    """Consulta o nome de uma instituição pelo código de compensação."""

    def __init__(self, data_dir=None):
        self.data_dir = Path(data_dir) if data_dir else config.DATA_DIR
        self._tabela = None
        self._lock = threading.Lock()

    @property
    def tabela(self) -> dict:
        with self._lock:
            if self._tabela is None:
                self._tabela = _ler_tabela(self.data_dir / ARQUIVO_BANCOS, "id", "nome")
        return self._tabela

    def por_id(self, codigo: int):
        return self.tabela.get(int(codigo))


class DiretorioConvenios:
    """Consulta o nome de um convênio de arrecadação por segmento e código."""

    def __init__(self, data_dir=None):
        self.data_dir = Path(data_dir) if data_dir else config.DATA_DIR
        self._tabelas = {}
        self._lock = threading.Lock()

    def tabela(self, segmento: int) -> dict:
        with self._lock:
            if segmento not in self._tabelas:
                arquivo = ARQUIVOS_CONVENIOS.get(segmento)
                self._tabelas[segmento] = (
                    _ler_tabela(self.data_dir / arquivo, "id", "nome") if arquivo else {}
                )
        return self._tabelas[segmento]

    def por_id(self, segmento, codigo: int):
        return self.tabela(int(segmento)).get(int(codigo))


# Instâncias criadas na importação; as tabelas só são lidas na primeira consulta.
_BANCOS = DiretorioBancos()
_CONVENIOS = DiretorioConvenios()


def bancos_padrao() -> DiretorioBancos:
    """Instância única carregada do diretório configurado."""
    return _BANCOS


def convenios_padrao() -> DiretorioConvenios:
    return _CONVENIOS
