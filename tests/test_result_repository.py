# SPDX-License-Identifier: MIT

from pathlib import Path

import pytest

from structgantt.repository.result import ResultRepository

RESULT = """
block: |
  ---- struct gantt ----
  schema: tasks
  skipweekends: yes
  ----
columns:
  - label: Task
    type: other
  - label: Start
    type: date
  - label: End
    type: datetime
  - label: Color
    type: color
  - Notes
rows:
  - [Plan, 2024-01-01, "2024-01-10 12:30:00", "#ff0000", null]
  - [Wait, "", null, "#ffffff", later]
"""


def write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "result.yaml"
    path.write_text(text)
    return path


def test_loads_columns(tmp_path):
    repository = ResultRepository(write(tmp_path, RESULT))

    assert [c["type"] for c in repository.columns] == [
        "other",
        "date",
        "datetime",
        "color",
        "other",
    ]
    assert repository.columns[3]["config"] == {"default": "#ffffff"}
    assert repository.columns[4]["label"] == "Notes"


def test_normalizes_values(tmp_path):
    repository = ResultRepository(write(tmp_path, RESULT))
    plan, wait = repository.rows

    assert plan[1]["compare"] == "2024-01-01"
    assert plan[2]["compare"] == "2024-01-10 12:30:00"
    assert plan[4]["compare"] is None
    assert plan[4]["display"] == ""
    assert wait[1]["compare"] is None
    assert wait[2]["compare"] is None
    assert wait[4]["display"] == "later"


def test_reads_block_config(tmp_path):
    repository = ResultRepository(write(tmp_path, RESULT))

    assert repository.config == {"schema": "tasks", "skipweekends": True}


def test_config_mapping_overrides_block(tmp_path):
    text = RESULT + "config:\n  skipweekend: false\n"
    repository = ResultRepository(write(tmp_path, text))

    assert repository.config["skipweekends"] is False


def test_row_length_mismatch(tmp_path):
    text = "columns: [a, b]\nrows:\n  - [1]\n"

    with pytest.raises(ValueError):
        ResultRepository(write(tmp_path, text)).rows


def test_not_a_mapping(tmp_path):
    with pytest.raises(ValueError):
        ResultRepository(write(tmp_path, "- just\n- a list\n")).columns


def test_invalid_yaml(tmp_path):
    with pytest.raises(ValueError):
        ResultRepository(write(tmp_path, "columns: [a, b\nrows: {")).columns


def test_column_config_must_be_a_mapping(tmp_path):
    text = "columns: [{label: a, config: [1, 2]}]\nrows: []\n"

    with pytest.raises(ValueError):
        ResultRepository(write(tmp_path, text)).columns
