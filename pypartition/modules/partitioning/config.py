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
from pypartition.core import constants
from pypartition.core.configuration.utils import get_bool, get_float, get_string, \
    get_string_list
from pypartition.core.filesystems import canonical_filesystem_name
from pypartition.core.hw import get_firmware_type
from pypartition.core.signal import Signal
from pypartition.loggers import get_module_logger
from pypartition.modules.common.report import ConfigurationIssue, ConfigurationReport
from pypartition.modules.partitioning.constants import InstallChoice, SwapChoice
from pypartition.modules.partitioning.names import INSTALL_CHOICE_NAMES, SWAP_CHOICE_NAMES
from pypartition.modules.partitioning.publisher import publish_partition_choices, \
    publish_required_partition_table_types, publish_efi_configuration, \
    publish_required_storage
from pypartition.modules.partitioning.swap import resolve_swap_choices, pick_one

log = get_module_logger(__name__)

__all__ = ["PartitioningConfig"]


class PartitioningConfig:
    """The configuration of the partitioning module.

    Holds the choices of the user and publishes them to the global
    storage every time they change. Observers are notified through
    the *_changed signals before the setter returns.
    """

    def __init__(self, storage=None, canonicalize=None, firmware_detector=None):
        """Create a new configuration.

        :param storage: a global storage or None if it is not available
        :param canonicalize: a function that returns a canonical name
                             of a file system type
        :param firmware_detector: a function that returns "efi" or "bios"
        """
        self._storage = storage
        self._canonicalize = canonicalize or canonical_filesystem_name
        self._firmware_detector = firmware_detector or get_firmware_type
        self._report = ConfigurationReport()

        self.install_choice_changed = Signal()
        self._install_choice = InstallChoice.NO_CHOICE
        self._initial_install_choice = InstallChoice.NO_CHOICE

        self.swap_choice_changed = Signal()
        self._swap_choice = SwapChoice.NO_SWAP
        self._initial_swap_choice = SwapChoice.NO_SWAP
        self._swap_choices = frozenset()

        self.erase_fs_type_changed = Signal()
        self._erase_fs_type_choice = ""
        self._erase_fs_types = []

        self._required_storage_gib = constants.REQUIRED_STORAGE_UNSET
        self._allow_manual_partitioning = constants.DEFAULT_ALLOW_MANUAL_PARTITIONING
        self._required_partition_table_types = []

    @property
    def storage(self):
        """The global storage or None."""
        return self._storage

    @property
    def report(self):
        """The report of problems found in the configuration."""
        return self._report

    @property
    def install_choice(self):
        """The current install choice."""
        return self._install_choice

    @property
    def initial_install_choice(self):
        """The configured install choice."""
        return self._initial_install_choice

    def set_install_choice(self, choice):
        """Set the install choice.

        Raw integers are accepted as well. An invalid integer
        is replaced with no choice.

        :param choice: an install choice or an integer
        """
        choice = self._convert_choice(InstallChoice, choice, InstallChoice.NO_CHOICE)

        if choice == self._install_choice:
            return

        self._install_choice = choice
        log.debug("Install choice is set to '%s'.", choice.name)
        self.install_choice_changed.emit(choice)
        # Observers might have changed the choices again.
        publish_partition_choices(self._storage, self._install_choice, self._swap_choice)

    @property
    def swap_choice(self):
        """The current swap choice."""
        return self._swap_choice

    @property
    def initial_swap_choice(self):
        """The configured swap choice."""
        return self._initial_swap_choice

    @property
    def swap_choices(self):
        """The swap choices allowed by the configuration.

        :return: a frozenset of swap choices
        """
        return self._swap_choices

    def is_swap_choice_permitted(self, choice):
        """Is the swap choice allowed by the configuration?

        :param choice: a swap choice
        :return: True or False
        """
        return choice in self._swap_choices

    def set_swap_choice(self, choice):
        """Set the swap choice.

        Raw integers are accepted as well. An invalid integer
        is replaced with no swap.

        :param choice: a swap choice or an integer
        """
        choice = self._convert_choice(SwapChoice, choice, SwapChoice.NO_SWAP)

        if choice == self._swap_choice:
            return

        self._swap_choice = choice
        log.debug("Swap choice is set to '%s'.", choice.name)
        self.swap_choice_changed.emit(choice)
        publish_partition_choices(self._storage, self._install_choice, self._swap_choice)

    @property
    def erase_fs_type_choice(self):
        """The file system type for the erase mode.

        It might be an empty string.
        """
        return self._erase_fs_type_choice

    @property
    def erase_fs_types(self):
        """The file system types offered for the erase mode."""
        return list(self._erase_fs_types)

    def set_erase_fs_type_choice(self, name):
        """Set the file system type for the erase mode.

        The name is canonicalized first. Unknown file systems
        are accepted as they are resolved.

        :param name: a name of the file system type
        """
        fs_type = self._canonicalize(name)

        if fs_type == self._erase_fs_type_choice:
            return

        self._erase_fs_type_choice = fs_type
        log.debug("Erase file system type is set to '%s'.", fs_type)
        self.erase_fs_type_changed.emit(fs_type)

    @property
    def required_storage_gib(self):
        """Required storage in GiB or -1 if it is not set."""
        return self._required_storage_gib

    @property
    def allow_manual_partitioning(self):
        """Is the manual partitioning allowed?"""
        return self._allow_manual_partitioning

    @property
    def required_partition_table_types(self):
        """The required types of partition tables."""
        return list(self._required_partition_table_types)

    def set_configuration_map(self, configuration_map):
        """Load the configuration of the module.

        Invalid values are reported and replaced with defaults,
        so the configuration is always complete.

        :param configuration_map: a dictionary with the configuration
        :return: a configuration report
        """
        self._required_storage_gib = self._get_value(
            get_float,
            configuration_map,
            constants.CONFIG_REQUIRED_STORAGE,
            constants.REQUIRED_STORAGE_UNSET
        )

        self._swap_choices = resolve_swap_choices(configuration_map, self._report)

        self._initial_install_choice = self._find_choice(
            INSTALL_CHOICE_NAMES,
            configuration_map,
            constants.CONFIG_INITIAL_PARTITIONING_CHOICE
        )
        self.set_install_choice(self._initial_install_choice)

        initial_swap_choice = self._find_choice(
            SWAP_CHOICE_NAMES,
            configuration_map,
            constants.CONFIG_INITIAL_SWAP_CHOICE
        )

        if initial_swap_choice not in self._swap_choices:
            self._report.add(
                ConfigurationIssue.CHOICE_NOT_PERMITTED,
                "The setting *%s* is not one of the *%s*.",
                constants.CONFIG_INITIAL_SWAP_CHOICE,
                constants.CONFIG_USER_SWAP_CHOICES
            )
            initial_swap_choice = pick_one(self._swap_choices)

        self._initial_swap_choice = initial_swap_choice
        self.set_swap_choice(initial_swap_choice)

        self._allow_manual_partitioning = self._get_value(
            get_bool,
            configuration_map,
            constants.CONFIG_ALLOW_MANUAL_PARTITIONING,
            constants.DEFAULT_ALLOW_MANUAL_PARTITIONING
        )

        if constants.CONFIG_AVAILABLE_FILE_SYSTEM_TYPES in configuration_map:
            self._load_erase_fs_types(configuration_map)

        self._required_partition_table_types = self._get_value(
            get_string_list,
            configuration_map,
            constants.CONFIG_REQUIRED_PARTITION_TABLE_TYPE,
            []
        )
        publish_required_partition_table_types(
            self._storage,
            self._required_partition_table_types
        )

        self._load_efi_configuration(configuration_map)
        return self._report

    def fill_global_storage_secondary_configuration(self):
        """Publish the settings shared with other modules.

        The required storage is published only if it is set and
        no other module has published it yet.
        """
        publish_required_storage(self._storage, self._required_storage_gib)

    def _load_erase_fs_types(self, configuration_map):
        fs_types = self._get_value(
            get_string_list,
            configuration_map,
            constants.CONFIG_AVAILABLE_FILE_SYSTEM_TYPES,
            []
        )
        self._erase_fs_types = fs_types

        if fs_types:
            self._erase_fs_type_choice = fs_types[0]
            self.erase_fs_type_changed.emit(self._erase_fs_type_choice)

    def _load_efi_configuration(self, configuration_map):
        mount_point = self._get_value(
            get_string,
            configuration_map,
            constants.CONFIG_EFI_SYSTEM_PARTITION,
            constants.DEFAULT_EFI_SYSTEM_PARTITION
        )
        size = self._get_value(
            get_string,
            configuration_map,
            constants.CONFIG_EFI_SYSTEM_PARTITION_SIZE,
            None
        )
        name = self._get_value(
            get_string,
            configuration_map,
            constants.CONFIG_EFI_SYSTEM_PARTITION_NAME,
            None
        )
        publish_efi_configuration(
            self._storage,
            self._firmware_detector(),
            mount_point,
            size=size,
            name=name
        )

    def _convert_choice(self, choice_type, choice, default):
        if isinstance(choice, choice_type):
            return choice

        try:
            return choice_type.from_raw(choice)
        except ValueError:
            self._report.add(
                ConfigurationIssue.OUT_OF_RANGE_VALUE,
                "Invalid %s '%s'.", choice_type.__name__, choice
            )
            return default

    def _find_choice(self, names, configuration_map, key):
        try:
            name = get_string(configuration_map, key, "")
        except ValueError as e:
            self._report.add(
                ConfigurationIssue.INVALID_VALUE,
                "Invalid value of *%s*: %s", key, e
            )
            return names.default

        choice, found = names.find_value(name)

        if not found and key in configuration_map:
            self._report.add(
                ConfigurationIssue.UNRECOGNIZED_NAME,
                "Unknown value '%s' of *%s*.", name, key
            )

        return choice

    def _get_value(self, getter, configuration_map, key, default):
        try:
            return getter(configuration_map, key, default)
        except ValueError as e:
            self._report.add(
                ConfigurationIssue.INVALID_VALUE,
                "Invalid value of *%s*: %s", key, e
            )
            return default
