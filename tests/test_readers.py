import pytest
import pyarrow as pa
import pyarrow.parquet as pq
from lineage_graph.base import EdgeFormatError, LineageEdge
from lineage_graph.config import LineageConfig
from lineage_graph.graph import LineageGraph
from lineage_graph.readers import CsvEdgeReader, ParquetEdgeReader, get_reader

def test_csv_reader_skips_header(jaffle_csv, jaffle_edges):
    edges = list(CsvEdgeReader(str(jaffle_csv)).read_edges())

    assert len(edges) == len(jaffle_edges)
    assert edges[0] == LineageEdge("jaffle_shop.customers", "stg_customers")

def test_csv_reader_without_header(tmp_path):
    path = tmp_path / "edges.tsv"
    path.write_text("a\tb\n\nb\tc\n")

    edges = list(CsvEdgeReader(str(path), delimiter="\t", has_header=False))
    assert edges == [LineageEdge("a", "b"), LineageEdge("b", "c")]

def test_csv_reader_ignores_extra_columns(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("source,target,kind\na,b,model\n")

    assert list(CsvEdgeReader(str(path))) == [LineageEdge("a", "b")]

def test_csv_reader_short_row(tmp_path):
    path = tmp_path / "edges.csv"
    path.write_text("source,target\na,b\nc\n")

    with pytest.raises(EdgeFormatError) as exc_info:
        list(CsvEdgeReader(str(path)))
    assert ":3:" in str(exc_info.value)

def test_csv_reader_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        list(CsvEdgeReader(str(tmp_path / "missing.csv")))

def test_graph_from_csv(jaffle_csv, jaffle_graph):
    graph = LineageGraph.from_csv(str(jaffle_csv))

    assert len(graph) == 10
    assert graph.to_dict() == jaffle_graph.to_dict()

def test_parquet_reader_batches(jaffle_parquet, jaffle_edges):
    reader = ParquetEdgeReader(str(jaffle_parquet), batch_size=3)
    edges = list(reader.read_edges())

    assert [(e.source, e.target) for e in edges] == jaffle_edges

def test_graph_from_parquet(jaffle_parquet, jaffle_graph):
    graph = LineageGraph.from_parquet(str(jaffle_parquet), batch_size=4)

    assert graph.to_dict() == jaffle_graph.to_dict()
    assert graph.upstream(["stg_orders"]) == {"jaffle_shop.orders"}

def test_parquet_reader_custom_columns(tmp_path):
    path = tmp_path / "edges.parquet"
    pq.write_table(pa.table({"src": ["a"], "dst": ["b"]}), str(path))

    reader = ParquetEdgeReader(str(path), source_column="src", target_column="dst")
    assert list(reader) == [LineageEdge("a", "b")]

def test_parquet_reader_missing_columns(tmp_path):
    path = tmp_path / "edges.parquet"
    pq.write_table(pa.table({"from": ["a"], "to": ["b"]}), str(path))

    with pytest.raises(EdgeFormatError) as exc_info:
        list(ParquetEdgeReader(str(path)))
    assert "source" in str(exc_info.value)

def test_parquet_reader_rejects_bad_batch_size():
    with pytest.raises(ValueError):
        ParquetEdgeReader("edges.parquet", batch_size=0)

def test_get_reader_detects_format(jaffle_csv, jaffle_parquet):
    assert isinstance(get_reader(LineageConfig(input_path=str(jaffle_csv))), CsvEdgeReader)

    reader = get_reader(LineageConfig(input_path=str(jaffle_parquet), parquet_batch_size=2))
    assert isinstance(reader, ParquetEdgeReader)
    assert reader.batch_size == 2

def test_get_reader_explicit_format(tmp_path):
    config = LineageConfig(input_path=str(tmp_path / "edges.data"), input_format="csv", csv_delimiter="|")
    reader = get_reader(config)

    assert isinstance(reader, CsvEdgeReader)
    assert reader.delimiter == "|"

def test_get_reader_requires_input():
    with pytest.raises(ValueError):
        get_reader(LineageConfig())
