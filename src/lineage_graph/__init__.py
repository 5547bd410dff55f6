"""In-memory lineage graph with transitive upstream/downstream queries"""
from .base import Node, LineageEdge, LineageError, MissingNodeError, EdgeFormatError, EdgeReader, ResultEmitter
from .graph import LineageGraph, NodeStore
from .readers.csv_reader import CsvEdgeReader
from .readers.parquet_reader import ParquetEdgeReader
from .emitters.console import ConsoleEmitter
from .emitters.json_emitter import JSONEmitter
from .config import LineageConfig

__version__ = "0.1.0"
