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
import configparser
import os
from abc import ABC


class ConfigurationError(Exception):
    """A general configuration error."""


class ConfigurationFileError(ConfigurationError):
    """A configuration file can't be read."""

    def __init__(self, msg, filename):
        super().__init__(msg)
        self.filename = filename

    def __str__(self):
        return "Failed to read the configuration file '{}': {}".format(
            self.filename, super().__str__()
        )


class ConfigurationDataError(ConfigurationError):
    """A configuration option has an invalid value."""

    def __init__(self, msg, section, option):
        super().__init__(msg)
        self.section = section
        self.option = option

    def __str__(self):
        return "Invalid value of the option '{}' in the section [{}]: {}".format(
            self.option, self.section, super().__str__()
        )


def create_parser():
    """Create a new config parser.

    Interpolation is disabled, so values can contain the % sign.

    :return: an instance of ConfigParser
    """
    return configparser.ConfigParser(interpolation=None)


def read_config(parser, path):
    """Read a configuration file.

    :param parser: an instance of ConfigParser
    :param path: a path to the file
    :raises: ConfigurationFileError
    """
    try:
        with open(path, "r") as f:
            parser.read_file(f, path)

    except (configparser.Error, OSError) as e:
        raise ConfigurationFileError(str(e), path) from e


class Section(ABC):
    """A base class for representation of a configuration section.

    Subclasses describe their options in _options. Every option has
    a key of the configuration map and a converter of the string
    value. The converter bool understands yes/no, on/off and so on.

    All options are optional. Only the options set by configuration
    files are in the configuration map of the section.
    """

    # A dictionary of option names and tuples of a key and a converter.
    _options = {}

    def __init__(self, section_name, parser):
        self._section_name = section_name
        self._parser = parser

    @property
    def name(self):
        """The name of the section."""
        return self._section_name

    def _get_option(self, option_name):
        """Get a converted value of the option.

        :param option_name: an option name
        :return: a converted value or None if the option is not set
        :raises: ConfigurationDataError
        """
        if not self._parser.has_option(self._section_name, option_name):
            return None

        _key, converter = self._options[option_name]
        value = self._parser.get(self._section_name, option_name)

        try:
            if converter is bool:
                return self._parser.getboolean(self._section_name, option_name)

            return converter(value)

        except ValueError as e:
            raise ConfigurationDataError(str(e), self._section_name, option_name) from e

    def get_configuration_map(self):
        """Get the configuration map of the section.

        :return: a dictionary of keys and converted values
        :raises: ConfigurationDataError
        """
        configuration_map = {}

        for option_name, (key, _converter) in self._options.items():
            value = self._get_option(option_name)

            if value is not None:
                configuration_map[key] = value

        return configuration_map


class Configuration:
    """A base class for representation of a configuration handler.

    Subclasses register their sections with _add_section.
    """

    def __init__(self):
        self._sources = []
        self._sections = []
        self._parser = create_parser()

    def _add_section(self, section_class, section_name):
        section = section_class(section_name, self._parser)
        self._sections.append(section)
        return section

    def get_sources(self):
        """Get the configuration sources.

        :return: a list of file names
        """
        return list(self._sources)

    def read(self, path):
        """Read a configuration file.

        :param path: a path to the file
        :raises: ConfigurationFileError
        """
        read_config(self._parser, path)
        self._sources.append(path)

    def read_from_directory(self, path):
        """Read all *.conf files of a directory sorted by their name.

        Options of later files override the earlier ones.

        :param path: a path to the directory
        """
        for filename in sorted(os.listdir(path)):
            if filename.endswith(".conf"):
                self.read(os.path.join(path, filename))

    def validate(self):
        """Check that all options of all sections can be converted.

        :raises: ConfigurationDataError
        """
        for section in self._sections:
            section.get_configuration_map()
