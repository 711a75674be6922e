"""Módulo de conveniência ``validador_boleto``.

Este arquivo reexporta toda a API pública definida no pacote ``boleto_utils``
e mantém o ponto de entrada de linha de comando.
"""

import sys

from boleto_utils import *  # noqa: F401,F403
from boleto_utils import __all__ as _BOLETO_UTILS_ALL
from boleto_utils.cli import main

__all__ = list(_BOLETO_UTILS_ALL) + ["main"]


if __name__ == "__main__":
    sys.exit(main())
