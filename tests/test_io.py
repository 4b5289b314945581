from __future__ import annotations

import json
import logging

import numpy as np
import pandas as pd
import pytest

from proteoplot.io import read_paired_table, read_value_table, write_json


def test_read_value_table_drops_missing_rows(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    path = tmp_path / "ratios.csv"
    pd.DataFrame(
        {
            "protein": ["P1", "P2", "P3", "P4"],
            "log2_ratio": [1.2, None, -0.9, "n/a"],
            "p": [0.01, 0.02, 0.2, 0.03],
        }
    ).to_csv(path, index=False)

    values, labels, pvals = read_value_table(
        path, "log2_ratio", pvalue_col="p", logger=logging.getLogger("test")
    )
    assert values.tolist() == [1.2, -0.9]
    assert pvals.tolist() == [0.01, 0.2]
    assert labels is None
    assert "Dropped 2 of 4 rows" in caplog.text


def test_read_value_table_with_labels_tsv(tmp_path):
    path = tmp_path / "ratios.tsv"
    path.write_text("y\tcat\n2.0\tUpregulated\n-1.0\t Unchanged \n", encoding="utf-8")
    values, labels, pvals = read_value_table(path, "y", label_col="cat")
    assert values.tolist() == [2.0, -1.0]
    assert labels.tolist() == ["Upregulated", "Unchanged"]
    assert pvals is None


def test_read_value_table_missing_column(tmp_path):
    path = tmp_path / "ratios.csv"
    path.write_text("a,b\n1,2\n", encoding="utf-8")
    with pytest.raises(KeyError, match="log2_ratio"):
        read_value_table(path, "log2_ratio")


def test_read_table_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_paired_table(tmp_path / "absent.csv", "a", "b")


def test_read_paired_table_keeps_complete_pairs(tmp_path, caplog):
    caplog.set_level(logging.WARNING)
    path = tmp_path / "pairs.csv"
    path.write_text("tmt,lfq\n1.0,1.1\n,0.4\n0.3,\n-0.2,-0.1\n", encoding="utf-8")
    a, b = read_paired_table(path, "tmt", "lfq", logger=logging.getLogger("test"))
    assert np.allclose(a, [1.0, -0.2])
    assert np.allclose(b, [1.1, -0.1])
    assert "Dropped 2 of 4 unpaired rows" in caplog.text


def test_write_json_creates_parents(tmp_path):
    out = tmp_path / "nested" / "summary.json"
    write_json(out, {"b": 1, "a": [1.5]})
    assert json.loads(out.read_text(encoding="utf-8")) == {"a": [1.5], "b": 1}
