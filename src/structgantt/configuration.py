# SPDX-License-Identifier: MIT

from typing import TypedDict

import platformdirs

APP_NAME = "structgantt"

CONFIG_PATH = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"


class Configuration(TypedDict):
    skipweekends: bool
    mode: str
    show_not_found: bool


def get_default_configuration() -> Configuration:
    return {
        "skipweekends": False,
        "mode": "xhtml",
        "show_not_found": True,
    }
