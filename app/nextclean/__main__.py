"""Allow running as ``python -m nextclean``."""

from nextclean.cli.main import run

if __name__ == "__main__":
    run()
