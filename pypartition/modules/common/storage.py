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
import copy

from pypartition.core.signal import Signal
from pypartition.loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["GlobalStorage"]


class GlobalStorage:
    """The global storage.

    A process-wide key-value store used to hand the configuration
    over to other modules of the installer. Values are copied on
    insert and on read, so modules never share mutable values.
    """

    def __init__(self):
        self.changed = Signal()
        self._data = {}

    def insert(self, key, value):
        """Insert a value, replacing the current value of the key.

        :param key: a string with the key
        :param value: a value
        """
        self._data[key] = copy.deepcopy(value)
        log.debug("Global storage key '%s' is set to '%s'.", key, value)
        self.changed.emit(key)

    def contains(self, key):
        """Is there a value for the given key?

        :param key: a string with the key
        :return: True or False
        """
        return key in self._data

    def value(self, key, default=None):
        """Get a copy of the value of the given key."""
        return copy.deepcopy(self._data.get(key, default))

    def remove(self, key):
        """Remove the given key.

        :return: True if the key was removed, otherwise False
        """
        if key not in self._data:
            return False

        del self._data[key]
        self.changed.emit(key)
        return True

    def keys(self):
        """Get a list of the keys."""
        return list(self._data.keys())

    def __contains__(self, key):
        return self.contains(key)

    def __len__(self):
        return len(self._data)
