"""Live matrix server (``coverage-matrix serve``).

Needs the optional ``[serve]`` extra::

    pip install coverage-matrix[serve]
"""

from __future__ import annotations

import importlib.util

SERVE_DEPENDENCIES = ("starlette", "uvicorn")


def _check_deps() -> None:
    """Raise ImportError naming any [serve] package that is not installed."""
    missing = [name for name in SERVE_DEPENDENCIES if importlib.util.find_spec(name) is None]
    if missing:
        raise ImportError(
            f"Missing serve dependencies: {', '.join(missing)}. "
            "Install with: pip install coverage-matrix[serve]"
        )
