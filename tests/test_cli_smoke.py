import json
from pathlib import Path

import pandas as pd
from typer.testing import CliRunner

from wgraph.cli import app

runner = CliRunner()


def _edges(tmp_path: Path) -> Path:
    p = tmp_path / "edges.csv"
    p.write_text(
        "u,v,weight\n"
        "A,B,1\n"
        "B,C,2\n"
        "A,C,4\n"
        "C,D,1\n"
        "X,Y,5\n",
        encoding="utf-8",
    )
    return p


def test_analyze_writes_reports(tmp_path: Path):
    edges = _edges(tmp_path)
    out_json = tmp_path / "report.json"
    out_png = tmp_path / "graph.png"

    r = runner.invoke(app, [
        "analyze", str(edges),
        "--source", "A",
        "--out-json", str(out_json),
        "--out-png", str(out_png),
    ])
    assert r.exit_code == 0, r.output
    assert out_png.exists()
    assert "OK" in r.output

    data = json.loads(out_json.read_text(encoding="utf-8"))
    assert data["connected"] is False
    assert data["component_count"] == 2
    assert data["components"] == [["A", "B", "C", "D"], ["X", "Y"]]
    assert data["distances"] == {"A": 0, "B": 1, "C": 3, "D": 4, "X": None, "Y": None}


def test_distances_csv(tmp_path: Path):
    edges = _edges(tmp_path)
    out_csv = tmp_path / "dist.csv"
    r = runner.invoke(app, ["distances", str(edges), "A", "--out-csv", str(out_csv)])
    assert r.exit_code == 0, r.output

    df = pd.read_csv(out_csv, dtype=str)
    assert dict(zip(df["vertex"], df["distance"])) == {
        "A": "0", "B": "1", "C": "3", "D": "4", "X": "inf", "Y": "inf",
    }


def test_components_and_articulation(tmp_path: Path):
    edges = _edges(tmp_path)
    r = runner.invoke(app, ["components", str(edges)])
    assert r.exit_code == 0, r.output
    assert "2 component(s)" in r.output

    p = tmp_path / "path.csv"
    p.write_text("u,v,weight\nA,B,1\nB,C,1\n", encoding="utf-8")
    r = runner.invoke(app, ["articulation", str(p)])
    assert r.exit_code == 0, r.output
    assert "CUT" in r.output and "B" in r.output


def test_bad_inputs(tmp_path: Path):
    r = runner.invoke(app, ["components", str(tmp_path / "nope.csv")])
    assert r.exit_code != 0

    r = runner.invoke(app, ["distances", str(_edges(tmp_path)), "Q"])
    assert r.exit_code != 0
