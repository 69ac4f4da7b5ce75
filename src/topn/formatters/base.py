"""Base formatter ABC and registry."""

from __future__ import annotations

from abc import ABC, abstractmethod

from rich.console import Console

from topn.models import Record
from topn.settings import Settings

_REGISTRY: dict[str, type[BaseFormatter]] = {}


class BaseFormatter(ABC):
    """Abstract base for result formatters."""

    name: str = "base"
    description: str = ""

    @abstractmethod
    def write(self, records: list[Record], console: Console, settings: Settings) -> None:
        """Write *records* (already ordered) to *console*."""
        ...


def register_formatter(cls: type[BaseFormatter]) -> type[BaseFormatter]:
    """Class decorator to register a formatter."""
    _REGISTRY[cls.name] = cls
    return cls


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate a registered formatter by name."""
    if name not in _REGISTRY:
        raise KeyError(f"Unknown format: {name!r}. Available: {list(_REGISTRY)}")
    return _REGISTRY[name]()


def list_formatters() -> dict[str, type[BaseFormatter]]:
    """Return all registered formatters."""
    return dict(_REGISTRY)
