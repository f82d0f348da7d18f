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

from pypartition.loggers import get_module_logger

log = get_module_logger(__name__)

__all__ = ["ConfigurationIssue", "ConfigurationReport"]


class ConfigurationIssue(Enum):
    """Type of a problem found in the configuration.

    All of them are recoverable. The configuration falls back
    to a safe default and the problem is reported.
    """
    CONFLICTING_CONFIGURATION = "conflicting-configuration"
    DEPRECATED_SETTING = "deprecated-setting-used"
    UNRECOGNIZED_NAME = "unrecognized-enum-name"
    EMPTY_CHOICE_SET = "empty-resolved-set"
    UNSUPPORTED_CHOICE = "unsupported-choice-requested"
    OUT_OF_RANGE_VALUE = "out-of-range-raw-value"
    CHOICE_NOT_PERMITTED = "choice-not-permitted"
    INVALID_VALUE = "invalid-value"


class ConfigurationReport:
    """The report of problems found in the configuration."""

    def __init__(self):
        self._issues = []

    def add(self, issue, message, *args):
        """Report a problem and log it.

        Conflicting settings are logged as errors, the rest
        as warnings.

        :param issue: a type of the problem
        :param message: a message with %s placeholders
        :param args: arguments of the message
        """
        message = message % args if args else message
        self._issues.append((issue, message))

        if issue is ConfigurationIssue.CONFLICTING_CONFIGURATION:
            log.error(message)
        else:
            log.warning(message)

    def is_clean(self):
        """Is the configuration without problems?

        :return: True or False
        """
        return not self._issues

    def has_issue(self, issue):
        """Was a problem of the given type reported?

        :param issue: a type of the problem
        :return: True or False
        """
        return issue in self.issues

    @property
    def issues(self):
        """List of reported types of problems."""
        return [issue for issue, _ in self._issues]

    @property
    def warning_messages(self):
        """List of messages of the reported problems.

        :return: a list of strings
        """
        return [message for _, message in self._issues]

    def __repr__(self):
        return "{}({})".format(self.__class__.__name__, self.warning_messages)
