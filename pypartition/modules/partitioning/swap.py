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
from collections import namedtuple

from pypartition.core import constants
from pypartition.core.configuration.utils import get_bool, get_string_list
from pypartition.loggers import get_module_logger
from pypartition.modules.common.report import ConfigurationIssue, ConfigurationReport
from pypartition.modules.partitioning.constants import SwapChoice
from pypartition.modules.partitioning.names import SWAP_CHOICE_NAMES

log = get_module_logger(__name__)

__all__ = ["SwapSettings", "UNSUPPORTED_SWAP_CHOICES", "resolve_swap_settings",
           "resolve_swap_choices", "pick_one"]

# Swap choices that can be configured, but are not supported yet.
UNSUPPORTED_SWAP_CHOICES = (
    SwapChoice.REUSE_SWAP,
)

SwapSettings = namedtuple(
    "SwapSettings",
    ["choices", "ensure_suspend_to_disk", "never_create_swap"]
)


def resolve_swap_settings(configuration_map, report=None):
    """Resolve the swap settings of the configuration.

    There are two ways to configure the swap. The deprecated one
    uses the ensureSuspendToDisk and neverCreateSwap flags, the
    new one lists the allowed choices in userSwapChoices. The new
    one wins if both of them are used.

    :param configuration_map: a dictionary with the configuration
    :param report: a configuration report or None
    :return: an instance of SwapSettings
    """
    if report is None:
        report = ConfigurationReport()

    has_user_choices = constants.CONFIG_USER_SWAP_CHOICES in configuration_map
    legacy_keys = [k for k in constants.LEGACY_SWAP_KEYS if k in configuration_map]

    if has_user_choices and legacy_keys:
        report.add(
            ConfigurationIssue.CONFLICTING_CONFIGURATION,
            "The configuration mixes old- and new-style swap settings. "
            "The setting *%s* is used.", constants.CONFIG_USER_SWAP_CHOICES
        )

    for key in legacy_keys:
        report.add(
            ConfigurationIssue.DEPRECATED_SETTING,
            "The setting *%s* is deprecated.", key
        )

    ensure_suspend_to_disk = _get_legacy_flag(
        configuration_map,
        constants.CONFIG_ENSURE_SUSPEND_TO_DISK,
        constants.DEFAULT_ENSURE_SUSPEND_TO_DISK,
        report
    )
    never_create_swap = _get_legacy_flag(
        configuration_map,
        constants.CONFIG_NEVER_CREATE_SWAP,
        constants.DEFAULT_NEVER_CREATE_SWAP,
        report
    )

    if has_user_choices:
        choices = _parse_user_choices(configuration_map, report)

        # Suspend if it's one of the choices. Suppress the swap
        # only if it's the only choice.
        ensure_suspend_to_disk = SwapChoice.FULL_SWAP in choices
        never_create_swap = choices == {SwapChoice.NO_SWAP}

    elif never_create_swap:
        choices = {SwapChoice.NO_SWAP}
    elif ensure_suspend_to_disk:
        choices = {SwapChoice.FULL_SWAP}
    else:
        choices = {SwapChoice.SMALL_SWAP}

    for choice in UNSUPPORTED_SWAP_CHOICES:
        if choice not in choices:
            continue

        report.add(
            ConfigurationIssue.UNSUPPORTED_CHOICE,
            "The swap choice '%s' is not supported.", SWAP_CHOICE_NAMES.find_name(choice)
        )
        choices.discard(choice)

    if not choices:
        report.add(
            ConfigurationIssue.EMPTY_CHOICE_SET,
            "There are no supported swap choices left."
        )
        choices = {SwapChoice.FULL_SWAP}

    log.debug("Resolved swap choices: %s", sorted(c.name for c in choices))
    return SwapSettings(frozenset(choices), ensure_suspend_to_disk, never_create_swap)


def resolve_swap_choices(configuration_map, report=None):
    """Resolve the set of swap choices allowed by the configuration.

    The set is never empty and never contains unsupported choices.

    :param configuration_map: a dictionary with the configuration
    :param report: a configuration report or None
    :return: a frozenset of swap choices
    """
    return resolve_swap_settings(configuration_map, report).choices


def pick_one(choices):
    """Pick one swap choice from the given set.

    Prefer no swap if there is more than one choice.

    :param choices: a set of swap choices
    :return: a swap choice
    """
    if not choices:
        return SwapChoice.NO_SWAP

    if len(choices) == 1:
        return next(iter(choices))

    if SwapChoice.NO_SWAP in choices:
        return SwapChoice.NO_SWAP

    return min(choices, key=lambda c: c.value)


def _get_legacy_flag(configuration_map, key, default, report):
    try:
        return get_bool(configuration_map, key, default)
    except ValueError as e:
        report.add(
            ConfigurationIssue.INVALID_VALUE,
            "Invalid value of *%s*: %s", key, e
        )
        return default


def _parse_user_choices(configuration_map, report):
    try:
        names = get_string_list(configuration_map, constants.CONFIG_USER_SWAP_CHOICES)
    except ValueError as e:
        report.add(
            ConfigurationIssue.INVALID_VALUE,
            "Invalid value of *%s*: %s", constants.CONFIG_USER_SWAP_CHOICES, e
        )
        names = []

    choices = set()

    for name in names:
        choice, found = SWAP_CHOICE_NAMES.find_value(name)

        if not found:
            report.add(
                ConfigurationIssue.UNRECOGNIZED_NAME,
                "Unknown swap choice '%s' is ignored.", name
            )
            continue

        choices.add(choice)

    if not choices:
        report.add(
            ConfigurationIssue.EMPTY_CHOICE_SET,
            "The setting *%s* has no valid choices: %s",
            constants.CONFIG_USER_SWAP_CHOICES, names
        )
        choices.add(SwapChoice.FULL_SWAP)

    return choices
