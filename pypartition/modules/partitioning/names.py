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
from pypartition.modules.partitioning.constants import InstallChoice, SwapChoice

__all__ = ["NamedEnumTable", "INSTALL_CHOICE_NAMES", "SWAP_CHOICE_NAMES"]


class NamedEnumTable:
    """A fixed table of names of enumerated values.

    More names can map to the same value. The first name of
    a value in the table is its canonical name.
    """

    def __init__(self, *entries):
        """Create a new table.

        The value of the first entry is returned for unknown names.

        :param entries: pairs of a name and a value
        """
        if not entries:
            raise ValueError("The table of names cannot be empty.")

        self._entries = tuple((name.lower(), value) for name, value in entries)

    @property
    def default(self):
        """The value of unknown names."""
        return self._entries[0][1]

    @property
    def names(self):
        """All names in the table."""
        return [name for name, _ in self._entries]

    def find_value(self, name):
        """Find a value by its name.

        Names are case-insensitive.

        :param name: a string with the name
        :return: a tuple of the value and a flag if it was found
        """
        if isinstance(name, str):
            name = name.strip().lower()

            for entry_name, value in self._entries:
                if entry_name == name:
                    return value, True

        return self.default, False

    def find_name(self, value):
        """Find the canonical name of a value.

        :param value: an enumerated value
        :return: a string with the name or an empty string
        """
        for name, entry_value in self._entries:
            if entry_value == value:
                return name

        return ""

    def __iter__(self):
        return iter(self._entries)


INSTALL_CHOICE_NAMES = NamedEnumTable(
    ("none", InstallChoice.NO_CHOICE),
    ("nochoice", InstallChoice.NO_CHOICE),
    ("alongside", InstallChoice.ALONGSIDE),
    ("erase", InstallChoice.ERASE),
    ("replace", InstallChoice.REPLACE),
    ("manual", InstallChoice.MANUAL),
)

SWAP_CHOICE_NAMES = NamedEnumTable(
    ("none", SwapChoice.NO_SWAP),
    ("small", SwapChoice.SMALL_SWAP),
    ("suspend", SwapChoice.FULL_SWAP),
    ("reuse", SwapChoice.REUSE_SWAP),
    ("file", SwapChoice.SWAP_FILE),
)
