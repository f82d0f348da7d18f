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
from configparser import ConfigParser


def get_bool(configuration_map, key, default):
    """Get a boolean value from the configuration map.

    Strings are converted the same way as in configuration files,
    so "yes", "on" and "1" are all true.

    :param configuration_map: a dictionary with the configuration
    :param key: a key of the value
    :param default: a value to return if the key is missing
    :return: True or False
    :raises: ValueError if the value is not a boolean
    """
    if key not in configuration_map:
        return default

    value = configuration_map[key]

    if isinstance(value, bool):
        return value

    if isinstance(value, str) and value.strip().lower() in ConfigParser.BOOLEAN_STATES:
        return ConfigParser.BOOLEAN_STATES[value.strip().lower()]

    raise ValueError("'{}' is not a valid boolean".format(value))


def get_float(configuration_map, key, default):
    """Get a real number from the configuration map.

    :raises: ValueError if the value is not a number
    """
    if key not in configuration_map:
        return default

    value = configuration_map[key]

    if isinstance(value, bool):
        raise ValueError("'{}' is not a valid number".format(value))

    try:
        return float(value)
    except (TypeError, ValueError) as e:
        raise ValueError("'{}' is not a valid number".format(value)) from e


def get_string(configuration_map, key, default=""):
    """Get a string from the configuration map.

    Numbers are converted to strings. A null value is an empty
    string, so the key still counts as set.

    :raises: ValueError if the value is not a string
    """
    if key not in configuration_map:
        return default

    if configuration_map[key] is None:
        return ""

    return _to_string(configuration_map[key])


def get_string_list(configuration_map, key, default=None):
    """Get a list of strings from the configuration map.

    A single string is a list with one item.

    :return: a new list of strings
    :raises: ValueError if the value is not a list of strings
    """
    if key not in configuration_map:
        return list(default or [])

    value = configuration_map[key]

    if isinstance(value, str):
        return [value]

    if not isinstance(value, (list, tuple)):
        raise ValueError("'{}' is not a valid list".format(value))

    return [_to_string(item) for item in value]


def _to_string(value):
    if isinstance(value, str):
        return value

    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)

    raise ValueError("'{}' is not a valid string".format(value))
