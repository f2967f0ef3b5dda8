import os
import shutil
from pathlib import Path

import pygit2
import pytest

from gfsync.repo import (
    RepositoryError,
    commit,
    has_changes,
    open_repository,
    push,
    relative_subdir,
    stage_all,
    status_entries,
    synchronize,
    workdir,
)
from gfsync.status import ChangeSet, StatusEntry, StatusFlag, reconcile

from conftest import SIGNATURE, write_files


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="needs git")


def make_changes(root):
    write_files(
        root,
        {
            "ofl/lora/Lora-Regular.ttf": "lora v2",
            "ofl/mavenpro/MavenPro[wght].ttf": "mavenpro",
            "ofl/mavenpro/OFL.txt": "license",
        },
    )
    (root / "ofl" / "gone" / "Gone-Regular.ttf").unlink()


def test_open_repository(fonts_repo):
    root = workdir(fonts_repo)
    repo = open_repository(root / "ofl")
    assert workdir(repo) == root


def test_open_repository_outside_git(tmp_path):
    with pytest.raises(RepositoryError):
        open_repository(tmp_path)


def test_status_entries(fonts_repo):
    root = workdir(fonts_repo)
    make_changes(root)

    assert status_entries(fonts_repo) == [
        StatusEntry("ofl/gone/Gone-Regular.ttf", frozenset([StatusFlag.WORKTREE_DELETED])),
        StatusEntry("ofl/lora/Lora-Regular.ttf", frozenset([StatusFlag.WORKTREE_MODIFIED])),
        StatusEntry("ofl/mavenpro/MavenPro[wght].ttf", frozenset([StatusFlag.WORKTREE_NEW])),
        StatusEntry("ofl/mavenpro/OFL.txt", frozenset([StatusFlag.WORKTREE_NEW])),
    ]


def test_status_entries_reconcile(fonts_repo):
    make_changes(workdir(fonts_repo))
    assert reconcile(status_entries(fonts_repo)) == ChangeSet(
        new=("ofl/mavenpro",),
        updated=("ofl/lora",),
        removed=("ofl/gone",),
    )


@pytest.mark.parametrize(
    "subdir, expected",
    [
        ("ofl", ["ofl/abel/Abel-Regular.ttf", "ofl/lora/Lora-Regular.ttf"]),
        ("ofl/abel", ["ofl/abel/Abel-Regular.ttf"]),
        ("apache", ["apache/roboto/Roboto-Regular.ttf"]),
        ("ufl", []),
        (".", [
            "apache/roboto/Roboto-Regular.ttf",
            "ofl/abel/Abel-Regular.ttf",
            "ofl/lora/Lora-Regular.ttf",
        ]),
    ],
)
def test_status_entries_subdir(fonts_repo, subdir, expected):
    root = workdir(fonts_repo)
    for path in (
        "apache/roboto/Roboto-Regular.ttf",
        "ofl/abel/Abel-Regular.ttf",
        "ofl/lora/Lora-Regular.ttf",
    ):
        (root / path).write_text("changed")
    assert [e.path for e in status_entries(fonts_repo, subdir)] == expected


def test_relative_subdir(fonts_repo):
    root = workdir(fonts_repo)
    assert relative_subdir(fonts_repo, root) == "."
    assert relative_subdir(fonts_repo, root / "ofl" / "abel") == "ofl/abel"


def test_relative_subdir_outside(fonts_repo, tmp_path):
    with pytest.raises(RepositoryError):
        relative_subdir(fonts_repo, tmp_path / "elsewhere")


def test_stage_all_and_commit(fonts_repo):
    make_changes(workdir(fonts_repo))
    parent = fonts_repo.head.target

    stage_all(fonts_repo)
    oid = commit(fonts_repo, "Synchronized with the official repository", SIGNATURE)

    assert status_entries(fonts_repo) == []
    new_commit = fonts_repo[oid]
    assert new_commit.message == "Synchronized with the official repository"
    assert new_commit.parent_ids == [parent]
    assert fonts_repo.head.target == oid
    tree = new_commit.tree
    assert "gone" not in tree["ofl"].peel(pygit2.Tree)
    assert "mavenpro" in tree["ofl"].peel(pygit2.Tree)


def test_commit_uses_default_signature(fonts_repo):
    (workdir(fonts_repo) / "ofl" / "lora" / "OFL.txt").write_text("license")
    stage_all(fonts_repo)
    oid = commit(fonts_repo, "Add license")
    assert fonts_repo[oid].author.email == SIGNATURE.email


def test_commit_unborn_head(tmp_path):
    repo = pygit2.init_repository(str(tmp_path / "empty"))
    write_files(Path(repo.workdir), {"ofl/abel/Abel-Regular.ttf": "abel"})

    stage_all(repo)
    oid = commit(repo, "First", SIGNATURE)

    assert repo[oid].parent_ids == []


def test_push_without_remote(fonts_repo):
    with pytest.raises(RepositoryError):
        push(fonts_repo, "origin")


@requires_git
def test_push(fonts_repo, remote_repo):
    push(fonts_repo, "origin")
    branch = fonts_repo.head.shorthand
    assert remote_repo.references[f"refs/heads/{branch}"].target == fonts_repo.head.target


@requires_git
def test_synchronize(fonts_repo, remote_repo):
    root = workdir(fonts_repo)
    make_changes(root)

    assert synchronize(root, "Synchronized with the official repository") is True

    assert status_entries(fonts_repo) == []
    branch = fonts_repo.head.shorthand
    head = fonts_repo.head.peel(pygit2.Commit)
    assert head.message == "Synchronized with the official repository"
    assert remote_repo.references[f"refs/heads/{branch}"].target == head.id


@requires_git
def test_synchronize_nothing_to_commit(fonts_repo, remote_repo):
    head = fonts_repo.head.target
    assert synchronize(workdir(fonts_repo)) is False
    assert fonts_repo.head.target == head
    branch = fonts_repo.head.shorthand
    assert remote_repo.references[f"refs/heads/{branch}"].target == head


@pytest.mark.parametrize(
    "entries, expected",
    [
        ([], False),
        ([StatusEntry("ofl/abel/Abel-Regular.ttf", frozenset())], False),
        (
            [
                StatusEntry("ofl/abel/Abel-Regular.ttf", frozenset()),
                StatusEntry(
                    "ofl/lora/Lora-Regular.ttf",
                    frozenset([StatusFlag.WORKTREE_MODIFIED]),
                ),
            ],
            True,
        ),
    ],
)
def test_has_changes(entries, expected):
    assert has_changes(entries) == expected


@requires_git
def test_synchronize_typechange_only(fonts_repo, remote_repo):
    root = workdir(fonts_repo)
    font = root / "ofl" / "abel" / "Abel-Regular.ttf"
    font.unlink()
    os.symlink("METADATA.json", font)
    head = fonts_repo.head.target

    assert status_entries(fonts_repo) == [
        StatusEntry("ofl/abel/Abel-Regular.ttf", frozenset())
    ]
    assert synchronize(root) is False
    assert fonts_repo.head.target == head
