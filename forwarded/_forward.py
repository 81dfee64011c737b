"""
File: ./forwarded/_forward.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
from typing import Any, Dict, Mapping, Optional, NamedTuple

# Project
from ._node import ForwardNode
from .logger import get_logger

logger = get_logger(__name__)

_PARAMETERS = ("by", "for", "host", "proto")


class Forward(NamedTuple):
    """Element of the Forwarded header, one hop in the proxy chain

    Links:
        https://www.rfc-editor.org/rfc/rfc7239#section-5

    """

    by: Optional[ForwardNode] = None
    """User-agent facing interface of the proxy"""
    for_: Optional[ForwardNode] = None
    """Node making the request to the proxy"""
    host: Optional[str] = None
    """Host request header field as received by the proxy"""
    proto: Optional[str] = None
    """Protocol used to make the request"""

    @classmethod
    def from_pairs(cls, pairs: Mapping[str, str]) -> "Forward":
        """Build a forward element from its parsed token=value pairs

        Parameter names are matched case-insensitively. Empty values are
        treated the same as absent parameters.

        Args:
            pairs: Token to value mapping of a single forwarded element

        Raises:
            EmptyNodeNameError: Invalid by= or for= value

        Returns:
            Forward element

        """
        params: Dict[str, str] = {}
        for token, value in pairs.items():
            name = token.lower()
            if name in _PARAMETERS:
                params[name] = value.strip()
            else:
                # https://www.rfc-editor.org/rfc/rfc7239#section-5.5
                logger.debug("Ignoring forwarded extension parameter: %s=%s", token, value)

        by = params.get("by")
        for_ = params.get("for")
        return cls(
            by=ForwardNode(by) if by else None,
            for_=ForwardNode(for_) if for_ else None,
            host=params.get("host") or None,
            proto=params.get("proto") or None,
        )

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {}
        if self.by is not None:
            data["by"] = self.by.to_dict()
        if self.for_ is not None:
            data["for"] = self.for_.to_dict()
        if self.host is not None:
            data["host"] = self.host
        if self.proto is not None:
            data["proto"] = self.proto
        return data


__all__ = ("Forward",)
