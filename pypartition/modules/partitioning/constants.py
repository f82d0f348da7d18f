#
# Copyright (C) 2026 Red Hat, Inc.
#
# This copyrighted material is made available to anyone wishing to use,
# modify, copy, or redistribute it subject to the terms and conditions of
# the GNU General Public License v.2, or (at your option) any later version.
# This program is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY expressed or implied, including the implied warranties of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General
# Public License for more details.  You should have received a copy of the
# GNU General Public License along with this program; if not, write to the
# Free Software Foundation, Inc., 31 Milk Street #960789 Boston, MA
# 02196 USA.  Any Red Hat trademarks that are incorporated in the
# source code or documentation are not subject to the GNU General Public
# License and may only be used or replicated with the express permission of
# Red Hat, Inc.
#
from enum import Enum

__all__ = ["InstallChoice", "SwapChoice"]


class _ChoiceEnum(Enum):

    @classmethod
    def from_raw(cls, value):
        """Convert the given raw integer into a choice.

        :param value: an integer
        :return: a member of the enumeration
        :raises: ValueError if there is no such choice
        """
        if isinstance(value, bool) or not isinstance(value, int):
            raise ValueError("'{}' is not a valid {}".format(value, cls.__name__))

        return cls(value)


class InstallChoice(_ChoiceEnum):
    """The partitioning strategy chosen by the user."""
    NO_CHOICE = 0
    ALONGSIDE = 1
    ERASE = 2
    REPLACE = 3
    MANUAL = 4


class SwapChoice(_ChoiceEnum):
    """The way of providing swap."""
    NO_SWAP = 0
    SMALL_SWAP = 1
    FULL_SWAP = 2
    REUSE_SWAP = 3
    SWAP_FILE = 4
