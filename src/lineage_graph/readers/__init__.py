"""Edge reader implementations for lineage graph input"""
from .csv_reader import CsvEdgeReader
from .parquet_reader import ParquetEdgeReader
from .factory import get_reader

__all__ = [
    'CsvEdgeReader',
    'ParquetEdgeReader',
    'get_reader'
]
