"""Entry point for `python -m themebuilder`."""

import sys


def main() -> None:
    from themebuilder.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
