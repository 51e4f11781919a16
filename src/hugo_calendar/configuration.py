# SPDX-License-Identifier: MIT

from pathlib import Path
from typing import TypedDict

import platformdirs

APP_NAME = "hugo-calendar"

CONFIG_PATH: Path = platformdirs.user_config_path(APP_NAME)
APP_CONFIG_PATH: Path = CONFIG_PATH / "config.yaml"

# Each calendar is 20 columns of day cells plus a 2 column gutter
CALENDAR_CONTENT_WIDTH = 20
CALENDAR_SEPARATOR = "  "
CALENDAR_WIDTH = CALENDAR_CONTENT_WIDTH + len(CALENDAR_SEPARATOR)


class Configuration(TypedDict):
    filter_text: str
    show_counts: bool
    fallback_width: int
    posts_dir: str
    post_filename: str
    today_style: str
    active_style: str
    neutral_style: str
    header_style: str


def get_default_configuration() -> Configuration:
    return {
        "filter_text": "",
        "show_counts": False,
        "fallback_width": 120,
        "posts_dir": "content/posts",
        "post_filename": "index.md",
        "today_style": "bold black on bright_cyan",
        "active_style": "bold bright_green",
        "neutral_style": "white",
        "header_style": "white",
    }
