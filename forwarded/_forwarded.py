"""
File: ./forwarded/_forwarded.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
from typing import Any, Dict, List, Tuple, Union, Mapping, Iterable, Iterator, Optional, Sequence, overload

# Project
from ._forward import Forward


class Forwarded(Sequence[Forward]):
    """Parsed Forwarded header, forward elements in the order they appear in the header"""

    __slots__ = ("_forwards",)

    def __init__(self, forwards: Iterable[Union[Forward, Mapping[str, str]]] = ()) -> None:
        self._forwards: Tuple[Forward, ...] = tuple(
            forward if isinstance(forward, Forward) else Forward.from_pairs(forward)
            for forward in forwards
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable[Mapping[str, str]]) -> "Forwarded":
        """Build a Forwarded header from a sequence of token=value mappings

        Args:
            pairs: One mapping per forward element

        Raises:
            EmptyNodeNameError: Invalid by= or for= value in any of the elements

        Returns:
            Forwarded header

        """
        return cls(Forward.from_pairs(element) for element in pairs)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._forwards)!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Forwarded):
            return self._forwards == other._forwards
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._forwards)

    def __len__(self) -> int:
        return len(self._forwards)

    def __iter__(self) -> Iterator[Forward]:
        return iter(self._forwards)

    @overload
    def __getitem__(self, index: int) -> Forward:
        ...

    @overload
    def __getitem__(self, index: slice) -> "Forwarded":
        ...

    def __getitem__(self, index: Union[int, slice]) -> Union[Forward, "Forwarded"]:
        if isinstance(index, slice):
            return type(self)(self._forwards[index])
        return self._forwards[index]

    @property
    def forwards(self) -> Tuple[Forward, ...]:
        return self._forwards

    @property
    def first(self) -> Optional[Forward]:
        return self._forwards[0] if self._forwards else None

    def to_list(self) -> List[Dict[str, Any]]:
        return [forward.to_dict() for forward in self._forwards]


__all__ = ("Forwarded",)
