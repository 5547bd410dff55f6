import pytest
import pyarrow as pa
import pyarrow.parquet as pq
from lineage_graph.config import LineageConfig
from lineage_graph.graph import LineageGraph

JAFFLE_EDGES = [
    ("jaffle_shop.customers", "stg_customers"),
    ("jaffle_shop.orders", "stg_orders"),
    ("stripe.payment", "stg_payments"),
    ("gsheets.goals", "weekly_jaffle_metrics"),
    ("stg_customers", "dim_customers"),
    ("stg_orders", "dim_customers"),
    ("stg_orders", "fct_orders"),
    ("stg_payments", "fct_orders"),
    ("dim_customers", "weekly_jaffle_metrics"),
    ("fct_orders", "weekly_jaffle_metrics"),
]

@pytest.fixture
def jaffle_edges():
    """Edges of the jaffle_shop example project"""
    return list(JAFFLE_EDGES)

@pytest.fixture
def jaffle_graph(jaffle_edges):
    graph = LineageGraph()
    for source, target in jaffle_edges:
        graph.insert(source, target)
    return graph

@pytest.fixture
def jaffle_csv(tmp_path, jaffle_edges):
    """CSV file with a header row followed by the jaffle edges"""
    path = tmp_path / "lineage.csv"
    lines = ["source,target"] + [f"{source},{target}" for source, target in jaffle_edges]
    path.write_text("\n".join(lines) + "\n")
    return path

@pytest.fixture
def jaffle_parquet(tmp_path, jaffle_edges):
    path = tmp_path / "lineage.parquet"
    table = pa.table({
        "source": [source for source, _ in jaffle_edges],
        "target": [target for _, target in jaffle_edges],
    })
    pq.write_table(table, str(path))
    return path

@pytest.fixture
def test_config(jaffle_csv):
    """Config pointing at the jaffle CSV file"""
    config = LineageConfig()
    config.input_path = str(jaffle_csv)
    return config
