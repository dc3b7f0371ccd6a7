"""Base formatter interface for matrix output rendering."""

from abc import ABC, abstractmethod

from ..state import RenderState


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, state: RenderState) -> None:
        """Write the formatted state to stdout."""

    @abstractmethod
    def format(self, state: RenderState) -> str:
        """Return formatted string representation of the state."""
