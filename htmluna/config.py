# htmluna - An HTML to Luna converter
# Copyright (C) 2026 htmluna contributors
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.
from typing import Any
import os

from mautrix.util.config import BaseFileConfig, ConfigUpdateHelper

OUTPUT_FORMATS = ("luna", "outline", "pretty")


class Config(BaseFileConfig):
    def __getitem__(self, key: str) -> Any:
        try:
            value = os.environ[f"HTMLUNA_{key.replace('.', '_').upper()}"]
        except KeyError:
            return super().__getitem__(key)
        # Only coerce values whose default in the base config is not a string
        default = super().__getitem__(key)
        if isinstance(default, bool):
            if value.lower() not in ("true", "false"):
                raise ValueError(f"Expected true or false for {key}, got {value!r}")
            return value.lower() == "true"
        elif isinstance(default, int):
            if not value.isdigit():
                raise ValueError(f"Expected a number for {key}, got {value!r}")
            return int(value)
        return value

    def do_update(self, helper: ConfigUpdateHelper) -> None:
        copy, _, base = helper

        copy("output.format")
        if base["output.format"] not in OUTPUT_FORMATS:
            base["output.format"] = "luna"
        copy("output.compress")
        copy("output.outline_indent")
        copy("output.pretty_indent")
        copy("output.pretty_branch")

        copy("input.max_length")

        copy("logging")
