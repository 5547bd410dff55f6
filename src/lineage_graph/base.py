from abc import ABC, abstractmethod
from typing import Dict, Iterable, Iterator, Set
from dataclasses import dataclass, field


class LineageError(Exception):
    """Base class for lineage graph errors"""


class MissingNodeError(LineageError):
    """Raised when a query references a path that has no node in the graph"""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"missing node for path {path}")


class EdgeFormatError(LineageError):
    """Raised when an edge source yields a record that is not a (source, target) pair"""


@dataclass
class Node:
    """A single asset in the graph with its immediate relations"""
    path: str
    upstream: Set[str] = field(default_factory=set)
    downstream: Set[str] = field(default_factory=set)


@dataclass(frozen=True)
class LineageEdge:
    """Represents a lineage relationship between two asset paths"""
    source: str
    target: str

    def to_dict(self) -> Dict[str, str]:
        return {"source": self.source, "target": self.target}


class EdgeReader(ABC):
    """Base interface for anything that produces lineage edges"""

    @abstractmethod
    def read_edges(self) -> Iterator[LineageEdge]:
        """Yield edges one at a time, header rows already skipped"""
        pass

    def __iter__(self) -> Iterator[LineageEdge]:
        return self.read_edges()


class ResultEmitter(ABC):
    """Base interface for emitting lineage query results"""

    @abstractmethod
    def emit_result(self, direction: str, seeds: Iterable[str], result: Iterable[str]) -> str:
        """Emit the result of an upstream/downstream query"""
        pass

    @abstractmethod
    def emit_stats(self, stats: Dict[str, int]) -> str:
        """Emit graph statistics"""
        pass
