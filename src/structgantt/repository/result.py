# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import Any, Optional, cast, get_args

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from structgantt import syntax, time
from structgantt.model.column import Column, ColumnType
from structgantt.model.value import Row, Value

COLOR_DEFAULT = "#ffffff"


class ResultRepository:
    """Loads a materialized query result from a YAML document.

    The document holds a list of columns (label, type and optional config),
    a list of rows aligned to the columns, and optionally the block
    configuration either as a mapping under config or as the raw block body
    under block.
    """

    def __init__(self, path: Path) -> None:
        self.path = path
        self._columns: Optional[list[Column]] = None
        self._rows: Optional[list[Row]] = None
        self._config: Optional[dict[str, Any]] = None

    @property
    def columns(self) -> list[Column]:
        if self._columns is None:
            self.__load_data()
        if self._columns is None:
            raise ValueError()
        return self._columns

    @property
    def rows(self) -> list[Row]:
        if self._rows is None:
            self.__load_data()
        if self._rows is None:
            raise ValueError()
        return self._rows

    @property
    def config(self) -> dict[str, Any]:
        if self._config is None:
            self.__load_data()
        if self._config is None:
            raise ValueError()
        return self._config

    def __load_data(self) -> None:
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except YAMLError as e:
            raise ValueError(f"{self.path} is not valid YAML: {e}") from e
        if not isinstance(raw, dict):
            raise ValueError(f"{self.path} does not contain a query result")

        raw_columns = raw.get("columns") or []
        if not isinstance(raw_columns, list):
            raise ValueError("columns must be a list")
        self._columns = [
            convert_column(ordinal, raw_column)
            for ordinal, raw_column in enumerate(raw_columns)
        ]

        raw_rows = raw.get("rows") or []
        if not isinstance(raw_rows, list):
            raise ValueError("rows must be a list")
        self._rows = [convert_row(self._columns, raw_row) for raw_row in raw_rows]

        config: dict[str, Any] = {}
        block = raw.get("block")
        if isinstance(block, str):
            found = syntax.find_blocks(block)
            config.update(syntax.parse_config(found[0] if found else block))
        raw_config = raw.get("config") or {}
        if not isinstance(raw_config, dict):
            raise ValueError("config must be a mapping")
        for key, val in raw_config.items():
            key = str(key).lower()
            if not syntax.handle_config_key(key, val, config):
                config[key] = val
        self._config = config


def convert_column(ordinal: int, raw_column: Any) -> Column:
    if isinstance(raw_column, str):
        raw_column = {"label": raw_column}
    if not isinstance(raw_column, dict):
        raise ValueError(f"Column {ordinal} must be a mapping")

    column_type = str(raw_column.get("type", "other")).lower()
    if column_type not in get_args(ColumnType):
        column_type = "other"

    raw_config = raw_column.get("config") or {}
    if not isinstance(raw_config, dict):
        raise ValueError(f"Config of column {ordinal} must be a mapping")
    column_config = dict(raw_config)
    if column_type == "color":
        column_config.setdefault("default", COLOR_DEFAULT)

    return {
        "ordinal": ordinal,
        "label": str(raw_column.get("label", f"column {ordinal + 1}")),
        "type": cast(ColumnType, column_type),
        "config": column_config,
    }


def convert_row(columns: list[Column], raw_row: Any) -> Row:
    if not isinstance(raw_row, list) or len(raw_row) != len(columns):
        raise ValueError(f"Row {raw_row!r} does not match the {len(columns)} columns")
    return [convert_value(column, raw) for column, raw in zip(columns, raw_row)]


def convert_value(column: Column, raw: Any) -> Value:
    display = "" if raw is None else str(raw)

    compare: Optional[str]
    if column["type"] == "date":
        compare = time.normalize_date(raw)
    elif column["type"] == "datetime":
        compare = time.normalize_datetime(raw)
    else:
        compare = display or None

    return {
        "column": column["ordinal"],
        "raw": raw,
        "compare": compare,
        "display": display,
    }
