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
Render a ChangeSet as a Markdown changelog entry e.g

### October 19, 2026

New:

* [Maven Pro](https://fonts.google.com/specimen/Maven+Pro) by Joe Prince,
* Open Sans, and
* Roboto.

"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from datetime import date
from typing import Callable, Iterable, Optional

from gfsync.constants import MONTHS
from gfsync.description import Description
from gfsync.status import ChangeSet


log = logging.getLogger("gfsync.report")


def timestamp(day: date) -> str:
    return f"{MONTHS[day.month - 1]} {day.day}, {day.year}"


def format_line(desc: Description) -> Optional[str]:
    if not desc.name:
        return None
    line = desc.name
    if desc.url:
        line = f"[{line}]({desc.url})"
    if desc.designer:
        line += f" by {desc.designer}"
    return line


def oxford_list(lines: list[str]) -> str:
    res = []
    count = len(lines)
    for idx, line in enumerate(lines):
        if idx == count - 1:
            res.append(f"* {line}.")
        elif idx == count - 2:
            res.append(f"* {line} and" if count == 2 else f"* {line}, and")
        else:
            res.append(f"* {line},")
    return "\n".join(res)


def render_section(title: str, lines: list[str]) -> str:
    if not lines:
        return ""
    return f"{title}:\n\n{oxford_list(lines)}\n\n"


def describe_all(
    paths: Iterable[str],
    resolver: Callable[[str], Description],
    jobs: int = 1,
) -> list[Description]:
    """Resolve descriptions, preserving the order of paths."""
    paths = list(paths)
    if jobs <= 1 or len(paths) <= 1:
        return [resolver(p) for p in paths]
    with ThreadPoolExecutor(max_workers=jobs) as executor:
        return list(executor.map(resolver, paths))


def render(
    changes: ChangeSet,
    resolver: Callable[[str], Description],
    today: Optional[date] = None,
    jobs: int = 1,
) -> str:
    body = []
    for title, paths in changes.sections():
        lines = []
        for path, desc in zip(paths, describe_all(paths, resolver, jobs)):
            line = format_line(desc)
            if line is None:
                log.debug(f"Skipping {path}, cannot find a family name")
                continue
            lines.append(line)
        body.append(render_section(title, lines))

    body = "".join(body)
    if not body:
        return ""
    today = today or date.today()
    return f"### {timestamp(today)}\n\n{body}"
