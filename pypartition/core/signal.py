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
import inspect
from weakref import WeakMethod


class Signal:
    """A synchronous notification channel.

    Handlers are called in the order they were connected, directly
    from emit(). Bound methods are referenced weakly, so connecting
    an observer doesn't keep it alive. Plain functions and lambdas
    are referenced strongly.
    """

    def __init__(self):
        self._slots = []

    def emit(self, *args, **kwargs):
        # Handlers may connect or disconnect while we are emitting.
        for slot in list(self._slots):
            handler = self._resolve(slot)

            if handler is None:
                if slot in self._slots:
                    self._slots.remove(slot)
                continue

            handler(*args, **kwargs)

    def connect(self, handler):
        if self._find(handler) is not None:
            return

        if inspect.ismethod(handler):
            self._slots.append(WeakMethod(handler))
        else:
            self._slots.append(handler)

    def disconnect(self, handler):
        slot = self._find(handler)

        if slot is not None:
            self._slots.remove(slot)

    def clear(self):
        self._slots.clear()

    def __len__(self):
        return len([s for s in self._slots if self._resolve(s) is not None])

    @staticmethod
    def _resolve(slot):
        if isinstance(slot, WeakMethod):
            return slot()
        return slot

    def _find(self, handler):
        for slot in self._slots:
            if self._resolve(slot) == handler:
                return slot
        return None
