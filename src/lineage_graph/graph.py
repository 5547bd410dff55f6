import logging
from collections import deque
from typing import Dict, Iterable, Iterator, Optional, Set, Tuple, Union

from .base import LineageEdge, MissingNodeError, Node

logger = logging.getLogger(__name__)

EdgeLike = Union[LineageEdge, Tuple[str, str]]

UPSTREAM = "upstream"
DOWNSTREAM = "downstream"


class NodeStore:
    """Owns every node of a graph, keyed by path"""

    def __init__(self):
        self._nodes: Dict[str, Node] = {}

    def get(self, path: str) -> Optional[Node]:
        return self._nodes.get(path)

    def get_or_create(self, path: str) -> Node:
        """Return the node for path, registering an empty one on first reference"""
        node = self._nodes.get(path)
        if node is None:
            node = Node(path=path)
            self._nodes[path] = node
        return node

    def __contains__(self, path: str) -> bool:
        return path in self._nodes

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())


class LineageGraph:
    """In-memory lineage graph answering transitive upstream/downstream queries.

    Nodes reference their neighbors by path only; every traversal step
    resolves the path through the node store again. The graph is meant to
    be built once and then queried read-only. No locking is done, so callers
    that mutate while querying from several threads must serialize access
    themselves.
    """

    def __init__(self):
        self.nodes = NodeStore()

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeLike]) -> 'LineageGraph':
        """Build a graph from any iterable of edges or (source, target) pairs"""
        graph = cls()
        count = 0
        for edge in edges:
            if isinstance(edge, LineageEdge):
                graph.insert(edge.source, edge.target)
            else:
                source, target = edge
                graph.insert(source, target)
            count += 1
        logger.info("Built graph with %d nodes from %d edges", len(graph.nodes), count)
        return graph

    @classmethod
    def from_csv(cls, path: str, delimiter: str = ",", has_header: bool = True) -> 'LineageGraph':
        """Build a graph from a delimited text file of source,target rows"""
        from .readers.csv_reader import CsvEdgeReader
        return cls.from_edges(CsvEdgeReader(path, delimiter=delimiter, has_header=has_header))

    @classmethod
    def from_parquet(cls, path: str, batch_size: int = 1000,
                     source_column: str = "source", target_column: str = "target") -> 'LineageGraph':
        """Build a graph from a parquet file with source/target columns"""
        from .readers.parquet_reader import ParquetEdgeReader
        return cls.from_edges(ParquetEdgeReader(
            path,
            batch_size=batch_size,
            source_column=source_column,
            target_column=target_column,
        ))

    def insert(self, source: str, target: str) -> None:
        """Record the edge source -> target. Inserting the same edge again is a no-op"""
        if source == target:
            logger.debug("Accepting self-referential edge for %s", source)
        source_node = self.nodes.get_or_create(source)
        target_node = self.nodes.get_or_create(target)
        source_node.downstream.add(target)
        target_node.upstream.add(source)

    def upstream(self, paths: Iterable[str]) -> Set[str]:
        """Get every ancestor of the given paths.

        Raises MissingNodeError if any path reached during the walk,
        including the seeds themselves, is not in the graph.
        """
        return self._closure(paths, UPSTREAM)

    def downstream(self, paths: Iterable[str]) -> Set[str]:
        """Get every descendant of the given paths.

        Raises MissingNodeError if any path reached during the walk,
        including the seeds themselves, is not in the graph.
        """
        return self._closure(paths, DOWNSTREAM)

    def _closure(self, paths: Iterable[str], direction: str) -> Set[str]:
        # a bare string is one seed, not a sequence of one-character paths
        queue = deque([paths] if isinstance(paths, str) else paths)
        processed: Set[str] = set()
        found: Set[str] = set()

        while queue:
            path = queue.popleft()
            if path in processed:
                continue
            node = self.nodes.get(path)
            if node is None:
                raise MissingNodeError(path)
            neighbors = getattr(node, direction)
            queue.extend(neighbors)
            found.update(neighbors)
            processed.add(path)

        logger.debug("%s closure expanded %d nodes, found %d", direction, len(processed), len(found))
        return found

    def get_node(self, path: str) -> Node:
        node = self.nodes.get(path)
        if node is None:
            raise MissingNodeError(path)
        return node

    def edges(self) -> Iterator[LineageEdge]:
        """Yield every recorded edge once"""
        for node in self.nodes:
            for target in node.downstream:
                yield LineageEdge(node.path, target)

    def stats(self) -> Dict[str, int]:
        """Get node, edge, root and leaf counts"""
        edge_count = 0
        roots = 0
        leaves = 0
        for node in self.nodes:
            edge_count += len(node.downstream)
            if not node.upstream:
                roots += 1
            if not node.downstream:
                leaves += 1
        return {
            "nodes": len(self.nodes),
            "edges": edge_count,
            "roots": roots,
            "leaves": leaves,
        }

    def to_dict(self) -> Dict:
        """Get complete lineage graph"""
        return {
            "nodes": sorted(node.path for node in self.nodes),
            "edges": [edge.to_dict() for edge in self.edges()],
        }

    def print(self) -> None:
        """Print every node with its relations. Used for debugging"""
        for node in self.nodes:
            print(node.path, "-> upstream:", sorted(node.upstream), "downstream:", sorted(node.downstream))

    def __contains__(self, path: str) -> bool:
        return path in self.nodes

    def __len__(self) -> int:
        return len(self.nodes)
