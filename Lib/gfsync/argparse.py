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
from argparse import ArgumentParser
from pathlib import Path

from gfsync.scripts import usage


class GFSyncArgumentParser(ArgumentParser):
    """ArgumentParser with the options every gfsync command shares."""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_argument(
            "--config",
            type=Path,
            help="Path to an ini file with a [gfsync] section. "
            "Defaults to ~/.gfsync_config.ini if it exists",
        )
        self.add_argument(
            "--log-level",
            choices=("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"),
            default="WARNING",
        )
        self.add_argument(
            "--show-tracebacks",
            action="store_true",
            help=(
                "By default, exceptions will only print out error messages. "
                "Tracebacks won't be included since the tool is intended for "
                "type designers and not developers."
            ),
        )

    def error(self, message):
        # bad arguments print the usage line and exit cleanly
        usage()
        self.exit(0)
