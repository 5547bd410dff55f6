from typing import Dict, List, Any
from statistics import mean, median, stdev
from collections import defaultdict


class MetricsAggregator:
    """Aggregates numeric samples recorded across repeated lineage queries"""

    def __init__(self):
        self.metrics_history: Dict[str, List[float]] = defaultdict(list)

    def add_metrics(self, metrics: Dict[str, Any]) -> None:
        """Add one sample per metric. Non-numeric values are ignored"""
        for key, value in metrics.items():
            if isinstance(value, (int, float)) and not isinstance(value, bool):
                self.metrics_history[key].append(value)

    def get_stats(self, metric_name: str) -> Dict[str, float]:
        """Get statistics for a specific metric"""
        values = self.metrics_history.get(metric_name, [])

        if not values:
            return {
                "count": 0,
                "mean": 0,
                "median": 0,
                "min": 0,
                "max": 0,
                "stddev": 0
            }

        return {
            "count": len(values),
            "mean": mean(values),
            "median": median(values),
            "min": min(values),
            "max": max(values),
            "stddev": stdev(values) if len(values) > 1 else 0
        }
