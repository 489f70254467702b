"""
Integration tests for scripts/compute_jaccard_similarity.py.
"""

import subprocess
import sys
from pathlib import Path

import pandas as pd

SCRIPT = Path(__file__).parent.parent.parent / "scripts" / "compute_jaccard_similarity.py"


def _run(*args):
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
    )


def test_reports_and_writes_csv(write_edge_list, tmp_path):
    """Test a full run on a 4-cycle with CSV output."""
    edges = write_edge_list("4\n0 1\n0 2\n1 3\n2 3\n")
    output = tmp_path / "out" / "pairs.csv"

    result = _run("--input", str(edges), "--output", str(output))

    assert result.returncode == 0, result.stderr
    assert "Scored pairs: 4" in result.stdout
    assert "Max similarity: 1.0000" in result.stdout

    df = pd.read_csv(output)
    assert list(df.columns) == ["vertex1", "vertex2", "similarity"]
    assert len(df) == 4
    assert (df["similarity"] == 1.0).all()


def test_missing_input_exits_with_error(tmp_path):
    """Test that a missing edge list exits with status 1."""
    result = _run("--input", str(tmp_path / "missing.txt"))
    assert result.returncode == 1
    assert "Edge list not found" in result.stdout


def test_malformed_input_exits_with_error(write_edge_list):
    """Test that a malformed edge list exits with status 1."""
    edges = write_edge_list("0 1\nfoo bar\n")
    result = _run("--input", str(edges))
    assert result.returncode == 1
    assert "Invalid edge list" in result.stdout


def test_non_utf8_input_exits_with_error(tmp_path):
    """Test that an edge list with invalid bytes exits with status 1 and no traceback."""
    edges = tmp_path / "edges.txt"
    edges.write_bytes(b"0 1\n\xff\xfe 2\n")
    result = _run("--input", str(edges))
    assert result.returncode == 1
    assert "Invalid edge list" in result.stdout
    assert "Traceback" not in result.stderr


def test_truncated_edge_exits_with_error(write_edge_list):
    """Test that a single id in the middle of the file exits with status 1."""
    edges = write_edge_list("0 1\n1 2\n7\n2 3\n")
    result = _run("--input", str(edges))
    assert result.returncode == 1
    assert "expected two vertex ids" in result.stdout
