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
import gc
import unittest

from pypartition.core.signal import Signal


class Observer:
    def __init__(self):
        self._values = []

    @property
    def values(self):
        return self._values

    def add_value(self, value):
        self._values.append(value)


class SignalTestCase(unittest.TestCase):

    def setUp(self):
        self.values = []

    def test_method(self):
        """Test if a method can be connected to a signal."""
        signal = Signal()
        observer = Observer()

        signal.connect(observer.add_value)
        signal.emit("foo")
        signal.emit("bar")
        assert observer.values == ["foo", "bar"]

        signal.disconnect(observer.add_value)
        signal.emit("baz")
        assert observer.values == ["foo", "bar"]

    def test_function(self):
        """Test if a local function can be connected to a signal."""

        def add_value(value):
            self.values.append(value)

        signal = Signal()
        signal.connect(add_value)
        signal.emit("foo")
        assert self.values == ["foo"]

        signal.disconnect(add_value)
        signal.emit("bar")
        assert self.values == ["foo"]

    def test_lambda(self):
        """Test if a lambda can be connected to a signal."""
        signal = Signal()
        signal.connect(lambda value: self.values.append(value))
        signal.emit("foo")
        assert self.values == ["foo"]

    def test_keyword_arguments(self):
        """Test if keyword arguments are passed to handlers."""
        signal = Signal()
        signal.connect(lambda value=None: self.values.append(value))
        signal.emit(value="foo")
        assert self.values == ["foo"]

    def test_order(self):
        """Test that handlers are called in the order of connection."""
        signal = Signal()
        signal.connect(lambda: self.values.append(1))
        signal.connect(lambda: self.values.append(2))
        signal.connect(lambda: self.values.append(3))
        signal.emit()
        assert self.values == [1, 2, 3]

    def test_connect_twice(self):
        """Test that a handler is called only once."""
        signal = Signal()
        observer = Observer()

        signal.connect(observer.add_value)
        signal.connect(observer.add_value)
        assert len(signal) == 1

        signal.emit("foo")
        assert observer.values == ["foo"]

    def test_dead_observer(self):
        """Test that a signal doesn't keep observers alive."""
        signal = Signal()
        observer = Observer()
        signal.connect(observer.add_value)
        assert len(signal) == 1

        del observer
        gc.collect()

        assert len(signal) == 0
        signal.emit("foo")

    def test_disconnect_while_emitting(self):
        """Test that a handler can disconnect itself."""
        signal = Signal()

        def handler():
            self.values.append("called")
            signal.disconnect(handler)

        signal.connect(handler)
        signal.emit()
        signal.emit()
        assert self.values == ["called"]

    def test_clear(self):
        """Test that all handlers can be disconnected."""
        signal = Signal()
        observer = Observer()
        signal.connect(observer.add_value)
        signal.connect(lambda value: self.values.append(value))

        signal.clear()
        signal.emit("foo")

        assert observer.values == []
        assert self.values == []
