"""
File: ./forwarded/_exceptions.py
Author: Vítor Vasconcellos (vasconcellos.dev@gmail.com)
Project: forwarded

Copyright © 2021-2021 Vítor Vasconcellos
This program is free software; you can redistribute it and/or modify it under the terms of the GNU General Public License as published by the Free Software Foundation; either version 2 of the License, or (at your option) any later version.
This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
You should have received a copy of the GNU General Public License along with this program; if not, write to the Free Software Foundation, Inc., 51 Franklin Street, Fifth Floor, Boston, MA 02110-1301, USA.
"""


class ForwardedError(ValueError):
    """Base error for any failure while interpreting a Forwarded header"""


class EmptyNodeNameError(ForwardedError):
    def __init__(self) -> None:
        super().__init__("Empty node name while guessing type of the ForwardNode.")


class NotAnIpAddressError(ForwardedError):
    def __init__(self, node_name: str) -> None:
        super().__init__(f'This forward node with the node name "{node_name}" is not an IP address.')
        self.node_name = node_name


__all__ = ("ForwardedError", "EmptyNodeNameError", "NotAnIpAddressError")
