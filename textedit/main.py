from __future__ import annotations
import sys
from textedit.app import run_app


def main() -> int:
    """Entrypoint for the `textedit` script and `python -m textedit.main`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())
