"""
File: ./forwarded/_parser.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
from enum import Enum, auto
from typing import Dict, List

# Project
from .logger import get_logger
from ._forwarded import Forwarded

logger = get_logger(__name__)


class _State(Enum):
    TOKEN = auto()
    VALUE = auto()
    QUOTED_STRING = auto()
    QUOTED_STRING_ESCAPING = auto()


class Parser:
    """Forwarded header parser

    Scans the header one character at a time, accumulating token, value and
    quoted-string in separate buffers. Parser instances can be reused, but not
    shared between threads.

    Links:
        https://www.rfc-editor.org/rfc/rfc7239#section-4

    """

    def __init__(self) -> None:
        self._forwards: List[Dict[str, str]] = []
        self._pairs: Dict[str, str] = {}
        self._token = ""
        self._value = ""
        self._quoted_string = ""
        self._state = _State.TOKEN

    def _reset_pair(self) -> None:
        self._token = ""
        self._value = ""
        self._quoted_string = ""
        self._state = _State.TOKEN

    def _save_pair(self) -> None:
        # Only one of value or quoted_string should be filled
        self._pairs[self._token.strip()] = (self._value + self._quoted_string).strip()
        self._reset_pair()

    def _save_forward(self) -> None:
        if self._token:
            self._save_pair()

        self._forwards.append(self._pairs)
        self._pairs = {}
        self._reset_pair()

    def _consume(self, char: str) -> None:
        state = self._state

        if state is _State.TOKEN:
            if char == "=":
                self._state = _State.VALUE
            elif char == ",":
                self._save_forward()
            else:
                self._token += char

        elif state is _State.VALUE:
            if char == '"' and not self._value:
                self._state = _State.QUOTED_STRING
            elif char == ";":
                self._save_pair()
            elif char == ",":
                self._save_forward()
            else:
                self._value += char

        elif state is _State.QUOTED_STRING:
            if char == '"':
                self._state = _State.VALUE
            elif char == "\\":
                self._state = _State.QUOTED_STRING_ESCAPING
            else:
                self._quoted_string += char

        elif state is _State.QUOTED_STRING_ESCAPING:
            self._quoted_string += char
            self._state = _State.QUOTED_STRING

        else:  # pragma: no cover
            raise AssertionError(f"Unhandled parser state: {state}")

    def parse_pairs(self, header: str) -> List[Dict[str, str]]:
        """Parse a Forwarded header into its token=value pairs

        Args:
            header: Value for the Forwarded Header

        Returns:
            One token to value mapping per forwarded element, in header order

        """
        self._forwards = []
        self._pairs = {}
        self._reset_pair()

        for char in header:
            self._consume(char)

        if self._token:
            self._save_pair()
        if self._pairs:
            self._save_forward()

        forwards, self._forwards = self._forwards, []
        logger.debug("Parsed %d forwarded elements from: %s", len(forwards), header)
        return forwards

    def parse(self, header: str) -> Forwarded:
        """Parse a Forwarded header

        Args:
            header: Value for the Forwarded Header

        Raises:
            EmptyNodeNameError: Invalid by= or for= value

        Returns:
            Parsed Forwarded header

        """
        return Forwarded.from_pairs(self.parse_pairs(header))


def parse_pairs(header: str) -> List[Dict[str, str]]:
    """Parse a Forwarded header into its token=value pairs, using a new Parser"""
    return Parser().parse_pairs(header)


def parse(header: str) -> Forwarded:
    """Parse a Forwarded header, using a new Parser"""
    return Parser().parse(header)


__all__ = ("Parser", "parse", "parse_pairs")
