"""Allow ``python -m zippack``."""

from zippack.cli import app

if __name__ == "__main__":
    app()
