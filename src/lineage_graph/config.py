import logging
import os
from pathlib import Path
from typing import Optional
from dataclasses import dataclass
from dotenv import load_dotenv, find_dotenv

INPUT_FORMATS = ("auto", "csv", "parquet")
OUTPUT_FORMATS = ("console", "json")

_SUFFIX_FORMATS = {
    ".csv": "csv",
    ".parquet": "parquet",
    ".pq": "parquet",
}


@dataclass
class LineageConfig:
    """Configuration for loading and querying a lineage graph"""

    # Input settings
    input_path: Optional[str] = None
    input_format: str = "auto"

    # Delimited text settings
    csv_delimiter: str = ","
    csv_has_header: bool = True

    # Parquet settings
    parquet_batch_size: int = 1000
    parquet_source_column: str = "source"
    parquet_target_column: str = "target"

    # Output settings
    output_format: str = "console"
    output_dir: str = "lineage_output"

    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> 'LineageConfig':
        """Create config from environment variables"""
        if env_file:
            load_dotenv(env_file)
        else:
            env_file = find_dotenv(usecwd=True)
            if env_file:
                load_dotenv(env_file)

        return cls(
            input_path=os.getenv("LINEAGE_INPUT_PATH"),
            input_format=os.getenv("LINEAGE_INPUT_FORMAT", "auto").lower(),

            csv_delimiter=os.getenv("LINEAGE_CSV_DELIMITER", ","),
            csv_has_header=os.getenv("LINEAGE_CSV_HAS_HEADER", "true").lower() == "true",

            parquet_batch_size=int(os.getenv("LINEAGE_PARQUET_BATCH_SIZE", "1000")),
            parquet_source_column=os.getenv("LINEAGE_PARQUET_SOURCE_COLUMN", "source"),
            parquet_target_column=os.getenv("LINEAGE_PARQUET_TARGET_COLUMN", "target"),

            output_format=os.getenv("LINEAGE_OUTPUT_FORMAT", "console").lower(),
            output_dir=os.getenv("LINEAGE_OUTPUT_DIR", "lineage_output"),

            log_level=os.getenv("LINEAGE_LOG_LEVEL", "WARNING").upper(),
        )

    def validate(self) -> None:
        """Validate configuration"""
        if self.input_format not in INPUT_FORMATS:
            raise ValueError(f"Unsupported input format: {self.input_format}")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"Unsupported output format: {self.output_format}")
        if self.parquet_batch_size <= 0:
            raise ValueError("Parquet batch size must be positive")
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")

    def resolve_format(self) -> str:
        """Get the concrete input format, guessing from the file suffix for 'auto'"""
        if self.input_format != "auto":
            return self.input_format
        if not self.input_path:
            raise ValueError("Input path is required to detect the input format")
        suffix = Path(self.input_path).suffix.lower()
        if suffix not in _SUFFIX_FORMATS:
            raise ValueError(f"Cannot detect input format from file suffix '{suffix}'")
        return _SUFFIX_FORMATS[suffix]

    def get_log_level(self) -> int:
        return logging.getLevelName(self.log_level.upper())
