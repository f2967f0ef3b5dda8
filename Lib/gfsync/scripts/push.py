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
gfsync push:

Stage every change in a git checkout, commit it and push the current
branch.

Usage:

$ gfsync push path/to/fonts
$ gfsync push path/to/fonts --remote upstream -m "Add Maven Pro"
"""
import logging
import sys
from pathlib import Path

from gfsync.argparse import GFSyncArgumentParser
from gfsync.config import ConfigError, load_settings
from gfsync.logging import setup_logging
from gfsync.repo import RepositoryError, synchronize


log = logging.getLogger("gfsync.scripts.push")


def main(args=None):
    parser = GFSyncArgumentParser(prog="gfsync push")
    parser.add_argument("path", type=Path, help="Path to the font repository")
    parser.add_argument("-r", "--remote", help="Remote to push to")
    parser.add_argument("-m", "--message", help="Commit message")
    args = parser.parse_args(args)
    setup_logging("gfsync.scripts.push", args, __name__)

    try:
        settings = load_settings(args.config)
        synchronize(
            args.path,
            message=args.message or settings.commit_message,
            remote=args.remote or settings.remote,
        )
    except (ConfigError, RepositoryError) as e:
        log.error(e)
        sys.exit(1)


if __name__ == "__main__":
    main()
