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

# =====================================
# GLOBAL CONSTANTS DEFINITIONS

# Sidecar file carrying the authoritative family name and designer
METADATA_FILENAME = "METADATA.json"

# Only TrueType binaries are used to infer a family name from a filename
FONT_EXTENSIONS = frozenset([".ttf"])

# Separator between the family name and the style in font filenames
# e.g MavenPro-Bold.ttf
STYLE_SEPARATOR = "-"

SPECIMEN_URL = "https://fonts.google.com/specimen/{}"

# seconds
PROBE_TIMEOUT = 10.0

COMMIT_MESSAGE = "Synchronized with the official repository"

DEFAULT_REMOTE = "origin"

CONFIG_FILENAME = ".gfsync_config.ini"
CONFIG_SECTION = "gfsync"

MONTHS = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
