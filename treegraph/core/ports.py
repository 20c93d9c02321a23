"""
treegraph Core — ports.py
=========================
Reader/writer contracts. Concrete formats subclass these; callers pick
the implementation and the core never inspects which one it was given.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from treegraph.core.node import GraphNode


class FormatError(ValueError):
    """Raised when text cannot be decoded to a tree, or a tree cannot be encoded."""


class GraphReader(ABC):
    """Decodes text into a GraphNode."""

    format_name: str = "unknown"

    @abstractmethod
    def read(self, src: str | bytes) -> "GraphNode":
        """Return the decoded tree or raise FormatError."""


class GraphWriter(ABC):
    """Encodes a GraphNode as text."""

    format_name: str = "unknown"

    @abstractmethod
    def write(self, graph: "GraphNode") -> str:
        """Return the encoded text or raise FormatError."""
