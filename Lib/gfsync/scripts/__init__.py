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
#
from importlib import import_module
from pathlib import Path
import sys


def _get_subcommands():
    subcommands = {}
    for module in Path(__file__).parent.glob("*.py"):
        module = module.stem
        if module.startswith("_"):
            continue
        subcommands[module.replace("_", "-")] = (module, "gfsync.scripts")
    return subcommands


subcommands = _get_subcommands()


def usage():
    commands = "|".join(sorted(subcommands))
    print(f"Usage: gfsync ({commands}) <path>")


def main(args=None):
    if args is None:
        args = sys.argv
    # gfsync <command> <path> [options]
    if len(args) < 3 or args[1] not in subcommands:
        usage()
        return
    (module, package) = subcommands[args[1]]
    mod = import_module(f".{module}", package)
    mod.main(args[2:])


if __name__ == "__main__":
    main()
