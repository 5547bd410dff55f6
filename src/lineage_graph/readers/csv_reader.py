import csv
import logging
from typing import Iterator

from ..base import EdgeFormatError, EdgeReader, LineageEdge

logger = logging.getLogger(__name__)


class CsvEdgeReader(EdgeReader):
    """Reads source,target rows from a delimited text file"""

    def __init__(self, path: str, delimiter: str = ",", has_header: bool = True):
        self.path = path
        self.delimiter = delimiter
        self.has_header = has_header

    def read_edges(self) -> Iterator[LineageEdge]:
        count = 0
        with open(self.path, newline="", encoding="utf-8") as f:
            reader = csv.reader(f, delimiter=self.delimiter)
            header_pending = self.has_header
            for row in reader:
                if not row:
                    continue
                if header_pending:
                    header_pending = False
                    continue
                if len(row) < 2:
                    raise EdgeFormatError(
                        f"{self.path}:{reader.line_num}: expected source and target columns, got {row!r}"
                    )
                count += 1
                yield LineageEdge(row[0], row[1])
        logger.info("Read %d edges from %s", count, self.path)
