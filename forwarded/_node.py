"""
File: ./forwarded/_node.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
from enum import Enum
from typing import Any, Dict, Optional

# Project
from ._exceptions import EmptyNodeNameError, NotAnIpAddressError


class NodeKind(Enum):
    """https://www.rfc-editor.org/rfc/rfc7239#section-6"""

    IPV4 = "ipv4"
    IPV6 = "ipv6"
    UNKNOWN = "unknown"
    IDENTIFIER = "identifier"


def classify_node(name: str) -> NodeKind:
    """Guess which kind of node a raw node name describes

    Args:
        name: Raw node name, as found in a by= or for= parameter

    Raises:
        EmptyNodeNameError: Node name is empty

    Returns:
        Node kind

    """
    if not name:
        raise EmptyNodeNameError()

    if name[0] == "_":
        # https://www.rfc-editor.org/rfc/rfc7239#section-6.3
        return NodeKind.IDENTIFIER
    if name == "unknown":
        # https://www.rfc-editor.org/rfc/rfc7239#section-6.2
        return NodeKind.UNKNOWN
    if name[0] == "[":
        # https://www.rfc-editor.org/rfc/rfc7239#section-6.1
        return NodeKind.IPV6

    return NodeKind.IPV4


class ForwardNode:
    """Interface that emitted or received the request (by / for)

    Links:
        https://www.rfc-editor.org/rfc/rfc7239#section-6

    """

    __slots__ = ("_name", "_kind")

    def __init__(self, name: str) -> None:
        # Classify eagerly, every accessor relies on it
        self._kind = classify_node(name)
        self._name = name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._name!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ForwardNode):
            return self._name == other._name
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._name)

    @property
    def name(self) -> str:
        return self._name

    @property
    def kind(self) -> NodeKind:
        return self._kind

    @property
    def is_ip(self) -> bool:
        return self._kind in (NodeKind.IPV4, NodeKind.IPV6)

    @property
    def is_v4(self) -> bool:
        return self._kind is NodeKind.IPV4

    @property
    def is_v6(self) -> bool:
        return self._kind is NodeKind.IPV6

    @property
    def is_unknown(self) -> bool:
        return self._kind is NodeKind.UNKNOWN

    @property
    def is_identifier(self) -> bool:
        return self._kind is NodeKind.IDENTIFIER

    @property
    def ip(self) -> str:
        """IP address portion of the node name

        Raises:
            NotAnIpAddressError: Node is an obfuscated identifier or unknown

        """
        if self._kind is NodeKind.IPV4:
            return self.ipv4
        if self._kind is NodeKind.IPV6:
            return self.ipv6

        raise NotAnIpAddressError(self._name)

    @property
    def ipv4(self) -> str:
        address, separator, _ = self._name.rpartition(":")
        return address if separator else self._name

    @property
    def ipv6(self) -> str:
        # IPv6 is always enclosed in square brackets
        # https://www.rfc-editor.org/rfc/rfc7239#section-6.1
        end = self._name.rfind("]")
        return self._name[1:end] if end >= 0 else self._name[1:]

    def _split_port(self) -> Optional[str]:
        # Port separator for IPv6 can only come after the closing bracket
        start = max(self._name.rfind("]"), 0)
        separator = self._name.rfind(":", start)
        return None if separator < 0 else self._name[separator + 1 :]

    @property
    def port_name(self) -> Optional[str]:
        """Raw text after the port separator, which may be an obfuscated port (_abc)"""
        return self._split_port()

    @property
    def port(self) -> Optional[int]:
        port = self._split_port()
        if port and port.isascii() and port.isdigit():
            return int(port)
        return None

    @property
    def identifier(self) -> str:
        """Obfuscated identifier without the leading '_', only meaningful for IDENTIFIER nodes"""
        return self._name[1:]

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"kind": self._kind.value, "name": self._name}

        if self.is_ip:
            data["address"] = self.ip
        elif self.is_identifier:
            data["identifier"] = self.identifier

        port = self.port
        if port is not None:
            data["port"] = port
        elif (port_name := self.port_name) is not None:
            data["port"] = port_name

        return data


__all__ = ("NodeKind", "ForwardNode", "classify_node")
