import json
import sys

import pygit2
import pytest


SIGNATURE = pygit2.Signature("Font Bot", "fonts@example.com")

FAMILIES = {
    "ofl/abel/Abel-Regular.ttf": "abel",
    "ofl/abel/METADATA.json": json.dumps({"name": "Abel", "designer": "MADType"}),
    "ofl/lora/Lora-Regular.ttf": "lora",
    "ofl/gone/Gone-Regular.ttf": "gone",
    "apache/roboto/Roboto-Regular.ttf": "roboto",
}


def write_files(root, files):
    for path, content in files.items():
        fp = root / path
        fp.parent.mkdir(parents=True, exist_ok=True)
        fp.write_text(content)


def commit_all(repo, message="Initial commit"):
    index = repo.index
    index.add_all()
    index.write()
    tree = index.write_tree()
    parents = [] if repo.head_is_unborn else [repo.head.target]
    return repo.create_commit("HEAD", SIGNATURE, SIGNATURE, message, tree, parents)


@pytest.fixture
def fonts_repo(tmp_path):
    root = tmp_path / "fonts"
    repo = pygit2.init_repository(str(root))
    repo.config["user.name"] = SIGNATURE.name
    repo.config["user.email"] = SIGNATURE.email
    write_files(root, FAMILIES)
    commit_all(repo)
    return repo


@pytest.fixture
def remote_repo(tmp_path, fonts_repo):
    remote = pygit2.init_repository(str(tmp_path / "remote.git"), bare=True)
    fonts_repo.remotes.create("origin", remote.path)
    return remote


@pytest.fixture(autouse=True)
def keep_excepthook(monkeypatch):
    # commands install a friendlier excepthook
    monkeypatch.setattr(sys, "excepthook", sys.excepthook)
