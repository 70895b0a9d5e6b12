# SPDX-License-Identifier: MIT

import re
from typing import Any

BLOCK_PATTERN = re.compile(r"----+ *struct gantt *-+\n(.*?)\n----+", re.DOTALL)

SKIP_WEEKENDS_KEYS = ("skipweekend", "skipweekends")

_FALSE_VALUES = ("", "0", "false", "no", "off")


def find_blocks(text: str) -> list[str]:
    """Return the body of every struct gantt block in a page."""
    return [match.group(1) for match in BLOCK_PATTERN.finditer(text)]


def parse_config(body: str) -> dict[str, Any]:
    """
    Parse the key: value lines of a block body.

    The skipweekends key (or its skipweekend alias) belongs to this plugin
    and is stored as a bool under skipweekends. All other keys are kept as
    stripped strings for the struct query parser.
    """
    config: dict[str, Any] = {}
    for line in body.splitlines():
        line = line.strip()
        if not line or line.startswith("#") or ":" not in line:
            continue
        key, val = line.split(":", 1)
        key = key.strip().lower()
        if handle_config_key(key, val, config):
            continue
        config[key] = val.strip()
    return config


def handle_config_key(key: str, val: Any, config: dict[str, Any]) -> bool:
    """Store one of our own config keys, returns False for unknown keys."""
    if key not in SKIP_WEEKENDS_KEYS:
        return False
    config["skipweekends"] = to_bool(val)
    return True


def to_bool(val: Any) -> bool:
    if isinstance(val, str):
        return val.strip().lower() not in _FALSE_VALUES
    return bool(val)
