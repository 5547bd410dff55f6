import logging
from typing import Iterator

import pyarrow.parquet as pq

from ..base import EdgeFormatError, EdgeReader, LineageEdge

logger = logging.getLogger(__name__)


class ParquetEdgeReader(EdgeReader):
    """Reads source/target columns from a parquet file in fixed-size batches"""

    def __init__(self, path: str, batch_size: int = 1000,
                 source_column: str = "source", target_column: str = "target"):
        if batch_size <= 0:
            raise ValueError("batch_size must be positive")
        self.path = path
        self.batch_size = batch_size
        self.source_column = source_column
        self.target_column = target_column

    def read_edges(self) -> Iterator[LineageEdge]:
        parquet_file = pq.ParquetFile(self.path)
        columns = [self.source_column, self.target_column]
        missing = [name for name in columns if name not in parquet_file.schema_arrow.names]
        if missing:
            raise EdgeFormatError(f"{self.path}: missing column(s) {', '.join(missing)}")

        count = 0
        for batch_number, batch in enumerate(parquet_file.iter_batches(batch_size=self.batch_size, columns=columns)):
            sources = batch.column(0).to_pylist()
            targets = batch.column(1).to_pylist()
            logger.debug("Read batch %d with %d rows from %s", batch_number, len(sources), self.path)
            for source, target in zip(sources, targets):
                if source is None or target is None:
                    raise EdgeFormatError(f"{self.path}: null path in row {count}")
                count += 1
                yield LineageEdge(str(source), str(target))
        logger.info("Read %d edges from %s", count, self.path)
