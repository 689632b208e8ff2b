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
from __future__ import annotations

from typing import Sequence


class ParseError(Exception):
    """A generic markup parsing error. Specific errors will subclass this."""

    def __init__(self, message: str, position: int | None = None) -> None:
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class TokenizeError(ParseError):
    """The input could not be split into tags."""
    pass


class MalformedMarkupError(ParseError):
    """A tag appeared where the markup grammar does not allow it."""

    def __init__(self, expected: str | None, found: str, position: int | None = None) -> None:
        if expected:
            message = f"Expected </{expected}>, found {found}"
        else:
            message = f"Unexpected {found}"
        super().__init__(message, position)
        self.expected = expected
        self.found = found


class UnterminatedTagError(ParseError):
    """The input ended while containers were still open."""

    def __init__(self, open_tags: Sequence[str]) -> None:
        tags = ", ".join(f"<{tag}>" for tag in open_tags)
        super().__init__(f"Unterminated tags at end of input: {tags}")
        self.open_tags = list(open_tags)
