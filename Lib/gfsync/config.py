# Copyright 2026 The gfsync Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""
Settings for gfsync commands.

Settings are read from an ini file, ~/.gfsync_config.ini by default:

[gfsync]
specimen_url = https://fonts.google.com/specimen/{}
timeout = 10
remote = origin
commit_message = Synchronized with the official repository
jobs = 4

Environment variables (GFSYNC_SPECIMEN_URL, GFSYNC_TIMEOUT, GFSYNC_REMOTE,
GFSYNC_COMMIT_MESSAGE, GFSYNC_JOBS) can be used instead.
"""
from __future__ import annotations

import logging
import os
from configparser import ConfigParser, Error as ConfigParserError
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Optional

from gfsync.constants import (
    COMMIT_MESSAGE,
    CONFIG_FILENAME,
    CONFIG_SECTION,
    DEFAULT_REMOTE,
    PROBE_TIMEOUT,
    SPECIMEN_URL,
)


log = logging.getLogger("gfsync.config")


class ConfigError(Exception):
    pass


@dataclass
class Settings:
    specimen_url: str = SPECIMEN_URL
    timeout: float = PROBE_TIMEOUT
    remote: str = DEFAULT_REMOTE
    commit_message: str = COMMIT_MESSAGE
    jobs: int = 1


def default_config_path() -> Path:
    return Path(os.path.expanduser("~")) / CONFIG_FILENAME


def _read_file(fp: Path) -> dict[str, str]:
    config = ConfigParser(interpolation=None)
    try:
        with open(fp, encoding="utf-8") as doc:
            config.read_file(doc)
    except (OSError, ConfigParserError) as e:
        raise ConfigError(f"Cannot read config file {fp}: {e}") from e
    if not config.has_section(CONFIG_SECTION):
        log.warning(f"{fp} has no [{CONFIG_SECTION}] section")
        return {}
    return dict(config[CONFIG_SECTION])


def _read_env() -> dict[str, str]:
    res = {}
    for key in (f.name for f in fields(Settings)):
        value = os.environ.get(f"GFSYNC_{key.upper()}")
        if value is not None:
            res[key] = value
    return res


def _parse(raw: dict[str, str]) -> Settings:
    settings = Settings()
    if "specimen_url" in raw:
        if "{}" not in raw["specimen_url"]:
            raise ConfigError(
                f"specimen_url '{raw['specimen_url']}' must contain a {{}} "
                "placeholder for the family name"
            )
        settings.specimen_url = raw["specimen_url"]
    if "timeout" in raw:
        try:
            settings.timeout = float(raw["timeout"])
        except ValueError as e:
            raise ConfigError(f"timeout must be a number of seconds: {e}") from e
    if "jobs" in raw:
        try:
            settings.jobs = int(raw["jobs"])
        except ValueError as e:
            raise ConfigError(f"jobs must be an integer: {e}") from e
        if settings.jobs < 1:
            raise ConfigError("jobs must be at least 1")
    if "remote" in raw:
        settings.remote = raw["remote"]
    if "commit_message" in raw:
        settings.commit_message = raw["commit_message"]
    return settings


def load_settings(fp: "Optional[str | Path]" = None) -> Settings:
    """Load settings, the config file wins over environment variables."""
    if fp is not None:
        fp = Path(fp)
        if not fp.exists():
            raise ConfigError(f"Config file {fp} does not exist")
    elif default_config_path().exists():
        fp = default_config_path()

    raw = _read_env()
    if fp is not None:
        log.debug(f"Reading settings from {fp}")
        raw.update(_read_file(fp))
    return _parse(raw)
