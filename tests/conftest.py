# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Callable

import pytest

from structgantt import configuration
from structgantt.model.column import Column
from structgantt.model.value import Row
from structgantt.repository.configuration import CONFIGURATION_REPO
from structgantt.repository.result import convert_column, convert_row

ResultFactory = Callable[[list[Any], list[list[Any]]], tuple[list[Column], list[Row]]]

TASK_COLUMNS = [
    {"label": "Task", "type": "other"},
    {"label": "Start", "type": "date"},
    {"label": "End", "type": "date"},
]


@pytest.fixture
def make_result() -> ResultFactory:
    def _make_result(
        column_specs: list[Any], raw_rows: list[list[Any]]
    ) -> tuple[list[Column], list[Row]]:
        columns = [convert_column(i, spec) for i, spec in enumerate(column_specs)]
        rows = [convert_row(columns, raw_row) for raw_row in raw_rows]
        return columns, rows

    return _make_result


@pytest.fixture
def config_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    path = tmp_path / "config" / "config.yaml"
    monkeypatch.setattr(configuration, "CONFIG_PATH", path.parent)
    monkeypatch.setattr(configuration, "APP_CONFIG_PATH", path)
    monkeypatch.setattr(CONFIGURATION_REPO, "_config", None)
    monkeypatch.setattr(CONFIGURATION_REPO, "is_dirty", False)
    return path
