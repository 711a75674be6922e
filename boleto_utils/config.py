"""
Configuração centralizada.
Carrega variáveis de ambiente, incluindo um arquivo .env na raiz do projeto.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PACKAGE_ROOT = Path(__file__).resolve().parent
PROJECT_ROOT = PACKAGE_ROOT.parent
load_dotenv(PROJECT_ROOT / ".env")

# Diretório com as tabelas de bancos e convênios (CSV)
DATA_DIR = Path(os.getenv("BOLETO_DATA_DIR") or PACKAGE_ROOT / "data")

# Nível de log usado pela linha de comando
LOG_LEVEL = os.getenv("BOLETO_LOG_LEVEL", "WARNING").upper()

# Chave secreta para sessões Flask
SECRET_KEY = os.getenv("SECRET_KEY", "dev")
