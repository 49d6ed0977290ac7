from adjacency_graph.cli import main


def test_show(tmp_path, capsys):
    path = tmp_path / "tri.edges"
    path.write_text("a b 5\nb c 10\nc a 7\nx\n", encoding="utf-8")
    assert main(["show", str(path)]) == 0
    out = capsys.readouterr().out
    assert "tri.edges: nodes=4, edges=3" in out
    assert "  a -> b (5)" in out
    assert "  b -> a (5)" in out
    assert "isolated: x" in out


def test_visualize(tmp_path, capsys):
    path = tmp_path / "g.json"
    path.write_text('{"edges": [["a", "b", 1]]}', encoding="utf-8")
    out_path = tmp_path / "out" / "g.html"
    assert main(["visualize", str(path), "--out", str(out_path), "--seed", "3"]) == 0
    assert out_path.exists()
    assert "Wrote graph visualization" in capsys.readouterr().out
