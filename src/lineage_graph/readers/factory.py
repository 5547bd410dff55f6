from ..base import EdgeReader
from ..config import LineageConfig


def get_reader(config: LineageConfig) -> EdgeReader:
    """Get the edge reader matching the configured input"""
    if not config.input_path:
        raise ValueError("Input path is required to read edges")

    input_format = config.resolve_format()
    if input_format == "csv":
        from .csv_reader import CsvEdgeReader
        return CsvEdgeReader(
            config.input_path,
            delimiter=config.csv_delimiter,
            has_header=config.csv_has_header
        )
    if input_format == "parquet":
        from .parquet_reader import ParquetEdgeReader
        return ParquetEdgeReader(
            config.input_path,
            batch_size=config.parquet_batch_size,
            source_column=config.parquet_source_column,
            target_column=config.parquet_target_column
        )
    raise ValueError(f"Unsupported input format: {input_format}")
