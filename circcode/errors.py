"""
circcode error taxonomy

Every failure the engine can report carries an ErrorKind. Code construction
raises CodeError subclasses, graph construction raises GraphError subclasses;
both share CircCodeError so callers at the boundary can catch one type.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    """Distinguishable failure kinds, with their display messages."""
    EMPTY_CODE = "Empty Code"
    EMPTY_WORD = "Empty Word"
    VERTEX = "Vertex Error"
    EDGE = "Edge Error"          # reserved, VERTEX is always hit first
    NO_SUBGRAPH = "Graph is no subgraph!"


class CircCodeError(Exception):
    """Base class for all circcode errors."""
    def __init__(self, kind: ErrorKind, detail: str = ""):
        message = kind.value if not detail else f"{kind.value}: {detail}"
        super().__init__(message)
        self.kind = kind


class CodeError(CircCodeError):
    """A word list or sequence cannot form a Code."""


class EmptyCodeError(CodeError):
    def __init__(self, detail: str = ""):
        super().__init__(ErrorKind.EMPTY_CODE, detail)


class EmptyWordError(CodeError):
    def __init__(self, detail: str = ""):
        super().__init__(ErrorKind.EMPTY_WORD, detail)


class GraphError(CircCodeError):
    """A split graph (or one of its sub-graphs) cannot be built."""


class VertexError(GraphError):
    def __init__(self, detail: str = ""):
        super().__init__(ErrorKind.VERTEX, detail)


class NoSubgraphError(GraphError):
    def __init__(self, detail: str = ""):
        super().__init__(ErrorKind.NO_SUBGRAPH, detail)
