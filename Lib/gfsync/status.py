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
Turn git status flags into a report of affected font families.

A status snapshot lists individual files. Families are reported as a
whole, so every file is keyed by its containing directory and filed into
one of three buckets: new, updated or removed.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import PurePosixPath
from typing import Callable, Iterable

from pygit2.enums import FileStatus


log = logging.getLogger("gfsync.status")


class StatusFlag(Enum):
    INDEX_NEW = "index-new"
    WORKTREE_NEW = "worktree-new"
    INDEX_MODIFIED = "index-modified"
    WORKTREE_MODIFIED = "worktree-modified"
    INDEX_DELETED = "index-deleted"
    WORKTREE_DELETED = "worktree-deleted"

    @classmethod
    def from_git(cls, bits: int) -> frozenset[StatusFlag]:
        """Decode a pygit2 status bit set. Bits with no counterpart
        (renamed, typechange, ignored, conflicted) are dropped."""
        return frozenset(flag for git, flag in _GIT_FLAGS if bits & git)


_GIT_FLAGS = (
    (FileStatus.INDEX_NEW, StatusFlag.INDEX_NEW),
    (FileStatus.WT_NEW, StatusFlag.WORKTREE_NEW),
    (FileStatus.INDEX_MODIFIED, StatusFlag.INDEX_MODIFIED),
    (FileStatus.WT_MODIFIED, StatusFlag.WORKTREE_MODIFIED),
    (FileStatus.INDEX_DELETED, StatusFlag.INDEX_DELETED),
    (FileStatus.WT_DELETED, StatusFlag.WORKTREE_DELETED),
)


NEW = frozenset([StatusFlag.INDEX_NEW, StatusFlag.WORKTREE_NEW])
UPDATED = frozenset([StatusFlag.INDEX_MODIFIED, StatusFlag.WORKTREE_MODIFIED])
REMOVED = frozenset([StatusFlag.INDEX_DELETED, StatusFlag.WORKTREE_DELETED])


@dataclass(frozen=True)
class StatusEntry:
    path: str
    flags: frozenset[StatusFlag]

    def is_new(self) -> bool:
        return bool(self.flags & NEW)

    def is_updated(self) -> bool:
        return bool(self.flags & UPDATED)

    def is_removed(self) -> bool:
        return bool(self.flags & REMOVED)


@dataclass(frozen=True)
class ChangeSet:
    new: tuple[str, ...] = field(default_factory=tuple)
    updated: tuple[str, ...] = field(default_factory=tuple)
    removed: tuple[str, ...] = field(default_factory=tuple)

    def is_empty(self) -> bool:
        return not (self.new or self.updated or self.removed)

    def sections(self):
        """Yield (title, paths) in report order."""
        yield "New", self.new
        yield "Updated", self.updated
        yield "Deleted", self.removed


def family_path(path: str) -> str:
    """ofl/mavenpro/MavenPro[wght].ttf --> ofl/mavenpro

    Files at the repository root have no family dir and are keyed by
    their own path."""
    parent = PurePosixPath(path).parent
    if str(parent) == ".":
        return str(PurePosixPath(path))
    return str(parent)


class _Bucket(dict):
    """Insertion ordered set of keys"""

    def add(self, key):
        if key in self:
            return False
        self[key] = None
        return True

    def discard(self, key):
        self.pop(key, None)


def reconcile(
    entries: Iterable[StatusEntry],
    key: Callable[[str], str] = family_path,
) -> ChangeSet:
    new = _Bucket()
    updated = _Bucket()
    removed = _Bucket()

    for entry in entries:
        path = key(entry.path)
        # an entry is filed once, new takes precedence over updated over removed
        if entry.is_new():
            bucket = new
        elif entry.is_updated():
            bucket = updated
        elif entry.is_removed():
            bucket = removed
        else:
            log.debug(f"Skipping {entry.path}, no tracked change")
            continue
        bucket.add(path)

    # a family deleted and recreated in one snapshot is an update
    for path in [p for p in new if p in removed]:
        new.discard(path)
        removed.discard(path)
        updated.add(path)

    for path in [p for p in removed if p in updated]:
        removed.discard(path)

    return ChangeSet(tuple(new), tuple(updated), tuple(removed))
