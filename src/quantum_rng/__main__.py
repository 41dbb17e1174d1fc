"""Script de ejecución.

Por qué existe:
- Permite ejecutar la CLI con `python -m quantum_rng` durante desarrollo.
- Mantiene un entrypoint simple además del console script `quantum-rng`.
"""

from __future__ import annotations

import sys

# Workaround for UnicodeEncodeError on Windows terminals/CI (cp1252 vs utf-8).
if sys.platform == "win32":
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

from quantum_rng.cli.main import run  # noqa: E402


def main() -> None:
    run()


if __name__ == "__main__":
    main()
