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
gfsync status:

Report the font families which were added, updated or deleted in a git
checkout since the last commit. The report is Markdown, ready to be pasted
into a changelog.

Usage:

$ gfsync status path/to/fonts
$ gfsync status path/to/fonts/ofl --jobs 8
"""
import logging
import sys
from functools import partial
from pathlib import Path

from gfsync.argparse import GFSyncArgumentParser
from gfsync.config import ConfigError, Settings, load_settings
from gfsync.description import resolve, specimen_exists
from gfsync.logging import setup_logging
from gfsync.repo import (
    RepositoryError,
    open_repository,
    relative_subdir,
    status_entries,
    workdir,
)
from gfsync.report import render
from gfsync.status import reconcile


log = logging.getLogger("gfsync.scripts.status")


def status_report(path: Path, settings: Settings, jobs=None) -> str:
    repo = open_repository(path)
    entries = status_entries(repo, relative_subdir(repo, path))
    changes = reconcile(entries)
    log.info(
        f"{len(changes.new)} new, {len(changes.updated)} updated, "
        f"{len(changes.removed)} deleted"
    )

    root = workdir(repo)
    probe = partial(specimen_exists, timeout=settings.timeout)

    def resolver(family):
        return resolve(root / family, probe=probe, url_template=settings.specimen_url)

    return render(changes, resolver, jobs=jobs or settings.jobs)


def main(args=None):
    parser = GFSyncArgumentParser(prog="gfsync status")
    parser.add_argument("path", type=Path, help="Path to the font repository")
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Number of families to describe in parallel",
    )
    args = parser.parse_args(args)
    setup_logging("gfsync.scripts.status", args, __name__)

    try:
        settings = load_settings(args.config)
        report = status_report(args.path, settings, args.jobs)
    except (ConfigError, RepositoryError) as e:
        log.error(e)
        sys.exit(1)
    sys.stdout.write(report)


if __name__ == "__main__":
    main()
