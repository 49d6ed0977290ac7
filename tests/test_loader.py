import json
from collections import Counter

import pytest

from adjacency_graph.loader import graph_from_edge_text, graph_from_json, load_graph


def test_graph_from_json():
    g = graph_from_json(json.dumps({"nodes": ["x"], "edges": [["a", "b", 5], ["b", "c", 10]]}))
    assert g.nodes() == {"a", "b", "c", "x"}
    assert Counter(g.edges()) == Counter([("a", "b", 5), ("b", "a", 5), ("b", "c", 10), ("c", "b", 10)])


def test_graph_from_json_stringifies_ids():
    g = graph_from_json('{"edges": [[1, 2, 3]]}')
    assert g.nodes() == {"1", "2"}


@pytest.mark.parametrize(
    "text",
    [
        "not json",
        "[]",
        '{"edges": [["a", "b"]]}',
        '{"edges": [["a", "b", "5"]]}',
        '{"edges": [["a", "b", true]]}',
        '{"edges": [["a", "b", 1.5]]}',
        '{"edges": null}',
        '{"nodes": 5}',
        '{"edges": [["a", "b", 1]], "nodes": "ab"}',
        '{"edges": [[null, "b", 1]]}',
        '{"nodes": [true]}',
    ],
)
def test_graph_from_json_rejects_malformed(text):
    with pytest.raises(ValueError):
        graph_from_json(text)


def test_graph_from_edge_text():
    text = """
    # triangle
    a b 5
    b c 10
    c a 7

    lonely
    """
    g = graph_from_edge_text(text)
    assert g.nodes() == {"a", "b", "c", "lonely"}
    assert len(g.edges()) == 6
    assert ("a", "c", 7) in g.edges()
    assert g.neighbors("lonely") == []


def test_graph_from_edge_text_reports_line_number():
    with pytest.raises(ValueError, match="Line 2"):
        graph_from_edge_text("a b 1\na b\n")
    with pytest.raises(ValueError, match="Line 1: weight"):
        graph_from_edge_text("a b heavy\n")


def test_load_graph_dispatches_on_suffix(tmp_path):
    j = tmp_path / "g.json"
    j.write_text('{"edges": [["a", "b", 2]]}', encoding="utf-8")
    t = tmp_path / "g.edges"
    t.write_text("a b 2\n", encoding="utf-8")
    assert load_graph(j).edges() == load_graph(t).edges()
