"""
File: ./forwarded/_header.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""

# Internal
from typing import Any, List, Mapping, Optional

# Project
from ._node import ForwardNode
from ._parser import parse
from ._forwarded import Forwarded

HEADER_NAME = "Forwarded"
ENVIRON_KEY = "HTTP_FORWARDED"


def parse_headers(headers: Any) -> Forwarded:
    """Parse the Forwarded header out of a request headers container

    Args:
        headers: Anything with a get method, like http.client.HTTPMessage or a dict.
            When get_all is available, repeated Forwarded fields are combined

    Links:
        https://www.rfc-editor.org/rfc/rfc7230#section-3.2.2

    Raises:
        EmptyNodeNameError: Invalid by= or for= value

    Returns:
        Parsed Forwarded header, empty when the header is missing

    """
    get_all = getattr(headers, "get_all", None)
    if callable(get_all):
        fields: Optional[List[str]] = get_all(HEADER_NAME)
        header = ",".join(fields) if fields else ""
    else:
        header = headers.get(HEADER_NAME) or ""

    return parse(header)


def parse_environ(environ: Mapping[str, str]) -> Forwarded:
    """Parse the Forwarded header out of a WSGI/CGI environment

    Raises:
        EmptyNodeNameError: Invalid by= or for= value

    """
    return parse(environ.get(ENVIRON_KEY) or "")


def parse_header_forwarded_for(header: str) -> List[ForwardNode]:
    """Parse forwarded element for

    Args:
        header: Value for the Forwarded Header

    Links:
        https://www.rfc-editor.org/rfc/rfc7239#section-5.2

    Raises:
        EmptyNodeNameError: Invalid by= or for= value

    Returns:
        Nodes defined in forwarded element for, client first

    """
    return [forward.for_ for forward in parse(header) if forward.for_ is not None]


__all__ = (
    "HEADER_NAME",
    "ENVIRON_KEY",
    "parse_headers",
    "parse_environ",
    "parse_header_forwarded_for",
)
