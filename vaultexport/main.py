from __future__ import annotations

import sys

from vaultexport.app import run_app


def main() -> int:
    """Module entrypoint for `python -m vaultexport` and the `vaultexport` console script."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
