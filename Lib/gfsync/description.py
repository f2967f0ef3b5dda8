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
Describe a font family for humans: its name, designer and specimen page.

A Description is built in three stages, each only filling fields the
previous stages left empty:

1. METADATA.json sidecar in the family directory
2. the family name inferred from a font filename, e.g
   MavenPro-Bold.ttf --> Maven Pro
3. the specimen url, found by probing Google Fonts with progressively
   shorter prefixes of the name, e.g Open+Sans+Condensed, Open+Sans, Open

None of the stages raise. Anything that goes wrong leaves the field unset.
"""
from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Callable, Optional

import requests  # type: ignore

from gfsync.constants import (
    FONT_EXTENSIONS,
    METADATA_FILENAME,
    PROBE_TIMEOUT,
    SPECIMEN_URL,
    STYLE_SEPARATOR,
)


log = logging.getLogger("gfsync.description")


@dataclass(frozen=True)
class Description:
    name: Optional[str] = None
    designer: Optional[str] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class MetadataRecord:
    name: Optional[str] = None
    designer: Optional[str] = None

    @classmethod
    def from_fp(cls, fp: Path) -> Optional[MetadataRecord]:
        try:
            data = json.loads(fp.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValueError) as e:
            log.debug(f"Cannot read {fp}: {e}")
            return None
        if not isinstance(data, dict):
            log.debug(f"{fp} does not contain a json object")
            return None
        return cls(name=_text(data.get("name")), designer=_text(data.get("designer")))


def _text(value):
    if isinstance(value, str) and value:
        return value
    return None


def _family_dir(path: Path) -> Path:
    """ofl/abel/Abel-Regular.ttf --> ofl/abel

    A path which no longer exists, e.g a deleted family, is its own
    family dir so the parent's metadata is never picked up."""
    if path.is_dir():
        return path
    if path.suffix or path.is_file():
        return path.parent
    return path


def from_metadata(desc: Description, family_dir: Path) -> Description:
    fp = family_dir / METADATA_FILENAME
    if not fp.is_file():
        return desc
    meta = MetadataRecord.from_fp(fp)
    if meta is None:
        return desc
    return replace(
        desc,
        name=desc.name or meta.name,
        designer=desc.designer or meta.designer,
    )


def infer_name(filename: str) -> Optional[str]:
    """MavenPro-Bold.ttf --> Maven Pro

    Returns None if the file isn't a font or no name is left."""
    stem, ext = os.path.splitext(filename)
    if ext.lower() not in FONT_EXTENSIONS:
        return None
    family = stem.split(STYLE_SEPARATOR)[0]
    name = []
    for idx, char in enumerate(family):
        if idx > 0 and "A" <= char <= "Z":
            name.append(" ")
        name.append(char)
    return "".join(name) or None


def from_filename(desc: Description, path: Path) -> Description:
    if desc.name:
        return desc
    if path.is_dir():
        try:
            candidates = sorted(p for p in path.iterdir() if p.is_file())
        except OSError as e:
            log.debug(f"Cannot list {path}: {e}")
            return desc
    else:
        candidates = [path]

    for fp in candidates:
        name = infer_name(fp.name)
        if name:
            return replace(desc, name=name)
    return desc


def specimen_candidates(name: str, url_template: str = SPECIMEN_URL) -> list[str]:
    """Open Sans Condensed --> [.../Open+Sans+Condensed, .../Open+Sans, .../Open]"""
    tokens = name.split()
    return [
        url_template.format("+".join(tokens[:count]))
        for count in range(len(tokens), 0, -1)
    ]


def specimen_exists(url: str, timeout: float = PROBE_TIMEOUT) -> bool:
    try:
        req = requests.head(url, timeout=timeout)
    except requests.RequestException as e:
        log.debug(f"Probe {url} failed: {e}")
        return False
    return req.status_code == 200


def from_specimen(
    desc: Description,
    probe: Callable[[str], bool] = specimen_exists,
    url_template: str = SPECIMEN_URL,
) -> Description:
    if not desc.name or desc.url:
        return desc
    for url in specimen_candidates(desc.name, url_template):
        if probe(url):
            log.debug(f"Found specimen {url}")
            return replace(desc, url=url)
    return desc


def resolve(
    path: "str | Path",
    probe: Callable[[str], bool] = specimen_exists,
    url_template: str = SPECIMEN_URL,
) -> Description:
    """Describe the family a font file or family directory belongs to."""
    path = Path(path)
    desc = from_metadata(Description(), _family_dir(path))
    desc = from_filename(desc, path)
    return from_specimen(desc, probe, url_template)
