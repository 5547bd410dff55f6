from typing import Dict, Any, Iterable
import json

from ..base import ResultEmitter


class ConsoleEmitter(ResultEmitter):
    """Prints lineage query results to the console"""

    def __init__(self, pretty_print: bool = True):
        self.pretty_print = pretty_print

    def _print_json(self, data: Dict[str, Any]) -> None:
        if self.pretty_print:
            print(json.dumps(data, indent=2, default=str))
        else:
            print(json.dumps(data, default=str))

    def emit_result(self, direction: str, seeds: Iterable[str], result: Iterable[str]) -> str:
        """Print query result to console"""
        print(f"\n=== {direction.capitalize()} Lineage ===")
        paths = sorted(result)
        self._print_json({
            "direction": direction,
            "seeds": list(seeds),
            "count": len(paths),
            "paths": paths
        })
        return f"{direction}:{len(paths)}"

    def emit_stats(self, stats: Dict[str, int]) -> str:
        """Print graph statistics to console"""
        print("\n=== Graph Statistics ===")
        self._print_json(stats)
        return "stats"
