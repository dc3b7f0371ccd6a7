"""Allow ``python -m coverage_matrix``."""

from .cli import app

if __name__ == "__main__":
    app()
