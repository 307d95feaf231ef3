"""Run `gix` from a checkout without installing it.

    python main.py config
    python main.py --version

The packages live under `src/`, so they are put on `sys.path` first; an
installed copy uses the `gix` console script instead.
"""

from __future__ import annotations

import sys
from pathlib import Path


def main() -> None:
    src = Path(__file__).resolve().parent / "src"
    if str(src) not in sys.path:
        sys.path.insert(0, str(src))

    from cli.main import run  # noqa: PLC0415

    run()


if __name__ == "__main__":
    main()
