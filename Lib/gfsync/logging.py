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
import logging
import sys

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"


class ForeignFilter(logging.Filter):
    def filter(self, record):
        return record.name.startswith("gfsync")


def setup_logging(facility, args, name):
    python_minus_m = name == "__main__"
    user_mode = not python_minus_m and not getattr(args, "show_tracebacks", False)

    # status reports go to stdout, keep logs on stderr
    handler = RichHandler(console=Console(stderr=True))

    if user_mode:
        # Even with --log-level DEBUG, in user mode we only want to see
        # gfsync-related logs, not urllib3's.
        handler.addFilter(ForeignFilter())

    logging.basicConfig(
        level=getattr(args, "log_level", "INFO"),
        format=LOG_FORMAT,
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )

    log = logging.getLogger(facility)

    def user_error_messages(_type, value, _traceback):
        """Print user-friendly error messages to the console when exceptions
        are raised. Intended for non-power users/type designers."""
        log.fatal(value)

    if user_mode:
        sys.excepthook = user_error_messages

    return log
