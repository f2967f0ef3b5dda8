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
# This module drives pygit2 for the few git operations gfsync needs.
# Pushing shells out to the git CLI since getting credentials with
# pygit2 is a pita.
from __future__ import annotations

import logging
import os
import subprocess
from pathlib import Path, PurePosixPath
from typing import Optional

import pygit2  # type: ignore

from gfsync.constants import COMMIT_MESSAGE, DEFAULT_REMOTE
from gfsync.status import StatusEntry, StatusFlag


log = logging.getLogger("gfsync.repo")


class RepositoryError(Exception):
    pass


def open_repository(path: "str | Path") -> pygit2.Repository:
    try:
        repo_path = pygit2.discover_repository(str(path))
        if repo_path is None:
            raise RepositoryError(f"{path} is not inside a git repository")
        return pygit2.Repository(repo_path)
    except (pygit2.GitError, KeyError, OSError) as e:
        raise RepositoryError(f"Cannot open repository at {path}: {e}") from e


def status_entries(
    repo: pygit2.Repository, subdir: Optional[str] = None
) -> list[StatusEntry]:
    """Status of the work tree, optionally limited to files in subdir.

    subdir is relative to the work tree root, e.g ofl."""
    try:
        status = repo.status()
    except (pygit2.GitError, OSError) as e:
        raise RepositoryError(
            f"Cannot check the status of the repository: {e}"
        ) from e
    prefix = None
    if subdir and subdir != ".":
        prefix = PurePosixPath(subdir).as_posix().rstrip("/") + "/"
    return [
        StatusEntry(path, StatusFlag.from_git(bits))
        for path, bits in sorted(status.items())
        if prefix is None or path.startswith(prefix)
    ]


def relative_subdir(repo: pygit2.Repository, path: "str | Path") -> str:
    """/path/to/fonts/ofl --> ofl"""
    root = workdir(repo)
    try:
        return Path(os.path.realpath(path)).relative_to(root).as_posix()
    except ValueError as e:
        raise RepositoryError(f"{path} is outside of {root}") from e


def stage_all(repo: pygit2.Repository) -> None:
    """git add --all"""
    index = repo.index
    try:
        for entry in status_entries(repo):
            if StatusFlag.WORKTREE_DELETED in entry.flags:
                index.remove(entry.path)
            elif entry.flags & {StatusFlag.WORKTREE_NEW, StatusFlag.WORKTREE_MODIFIED}:
                index.add(entry.path)
        index.write()
    except (pygit2.GitError, OSError) as e:
        raise RepositoryError(f"Cannot stage changes: {e}") from e


def commit(
    repo: pygit2.Repository,
    message: str = COMMIT_MESSAGE,
    signature: Optional[pygit2.Signature] = None,
) -> pygit2.Oid:
    try:
        author = signature or repo.default_signature
        tree = repo.index.write_tree()
        parents = [] if repo.head_is_unborn else [repo.head.target]
        oid = repo.create_commit("HEAD", author, author, message, tree, parents)
    except (pygit2.GitError, KeyError, ValueError) as e:
        raise RepositoryError(f"Cannot commit: {e}") from e
    log.info(f"Committed {oid}: {message}")
    return oid


def _current_branch(repo: pygit2.Repository) -> str:
    if repo.head_is_unborn or repo.head_is_detached:
        raise RepositoryError("Cannot push, HEAD is not on a branch")
    # refs/heads/main -> main
    return repo.head.shorthand


def push(
    repo: pygit2.Repository,
    remote: str = DEFAULT_REMOTE,
    branch: Optional[str] = None,
) -> None:
    branch = branch or _current_branch(repo)
    log.info(f"Pushing '{branch}' to '{remote}'")
    try:
        subprocess.run(
            ["git", "push", remote, branch],
            cwd=repo.workdir or repo.path,
            check=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
        )
    except (subprocess.CalledProcessError, OSError) as e:
        stderr = getattr(e, "stderr", None)
        detail = stderr.decode("utf-8", "replace").strip() if stderr else str(e)
        raise RepositoryError(f"Cannot push to {remote}: {detail}") from e


def has_changes(entries: list[StatusEntry]) -> bool:
    """Typechange or rename only entries have no flags and nothing to stage."""
    return any(entry.flags for entry in entries)


def synchronize(
    path: "str | Path",
    message: str = COMMIT_MESSAGE,
    remote: str = DEFAULT_REMOTE,
    signature: Optional[pygit2.Signature] = None,
) -> bool:
    """Commit every change in the work tree and push it.

    Returns True if a commit was made."""
    repo = open_repository(path)
    committed = False
    if has_changes(status_entries(repo)):
        stage_all(repo)
        commit(repo, message, signature)
        committed = True
    else:
        log.info("Nothing to commit")
    push(repo, remote)
    return committed


def workdir(repo: pygit2.Repository) -> Path:
    if repo.workdir is None:
        raise RepositoryError(f"{repo.path} is a bare repository")
    return Path(os.path.realpath(repo.workdir))
