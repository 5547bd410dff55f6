import json
from pathlib import Path
from typing import Dict, Iterable

from ..base import ResultEmitter


class JSONEmitter(ResultEmitter):
    """Writes lineage query results as numbered JSON files.

    Numbering continues from the highest ``<direction>_<n>.json`` already in
    the output directory, so repeated runs into one directory never
    overwrite earlier results.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def emit(self, data: dict, filename: str) -> Path:
        file_path = self.output_dir / filename
        with open(file_path, 'w') as f:
            json.dump(data, f, indent=2)
        return file_path

    def _next_index(self) -> int:
        highest = 0
        for path in self.output_dir.glob("*_*.json"):
            suffix = path.stem.rsplit("_", 1)[-1]
            if suffix.isdigit():
                highest = max(highest, int(suffix))
        return highest + 1

    def emit_result(self, direction: str, seeds: Iterable[str], result: Iterable[str]) -> str:
        paths = sorted(result)
        file_path = self.emit({
            "direction": direction,
            "seeds": list(seeds),
            "count": len(paths),
            "paths": paths
        }, f"{direction}_{self._next_index()}.json")
        return str(file_path)

    def emit_stats(self, stats: Dict[str, int]) -> str:
        return str(self.emit(dict(stats), "stats.json"))
