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
from pypartition.core.configuration.base import Configuration, Section


def _convert_list(value):
    """Convert a whitespace separated string into a list of strings."""
    return value.split()


class PartitioningSection(Section):
    """The Partitioning section.

    Every property returns None if the option is not set.
    """

    _options = {
        "required_storage":
            (constants.CONFIG_REQUIRED_STORAGE, float),
        "user_swap_choices":
            (constants.CONFIG_USER_SWAP_CHOICES, _convert_list),
        "ensure_suspend_to_disk":
            (constants.CONFIG_ENSURE_SUSPEND_TO_DISK, bool),
        "never_create_swap":
            (constants.CONFIG_NEVER_CREATE_SWAP, bool),
        "initial_partitioning_choice":
            (constants.CONFIG_INITIAL_PARTITIONING_CHOICE, str),
        "initial_swap_choice":
            (constants.CONFIG_INITIAL_SWAP_CHOICE, str),
        "allow_manual_partitioning":
            (constants.CONFIG_ALLOW_MANUAL_PARTITIONING, bool),
        "available_file_system_types":
            (constants.CONFIG_AVAILABLE_FILE_SYSTEM_TYPES, _convert_list),
        "required_partition_table_type":
            (constants.CONFIG_REQUIRED_PARTITION_TABLE_TYPE, _convert_list),
        "efi_system_partition":
            (constants.CONFIG_EFI_SYSTEM_PARTITION, str),
        "efi_system_partition_size":
            (constants.CONFIG_EFI_SYSTEM_PARTITION_SIZE, str),
        "efi_system_partition_name":
            (constants.CONFIG_EFI_SYSTEM_PARTITION_NAME, str),
    }

    @property
    def required_storage(self):
        """Required storage in GiB.

        For example: 5.5
        """
        return self._get_option("required_storage")

    @property
    def user_swap_choices(self):
        """Swap choices offered to the user.

        Valid values:

          none     Don't create any swap.
          small    Create a small swap partition.
          suspend  Create a swap partition usable for hibernation.
          reuse    Reuse an existing swap partition (not supported).
          file     Create a swap file.

        For example: none small suspend
        """
        return self._get_option("user_swap_choices")

    @property
    def ensure_suspend_to_disk(self):
        """Create a swap partition usable for hibernation.

        Deprecated, use user_swap_choices instead.
        """
        return self._get_option("ensure_suspend_to_disk")

    @property
    def never_create_swap(self):
        """Never create a swap partition.

        Deprecated, use user_swap_choices instead.
        """
        return self._get_option("never_create_swap")

    @property
    def initial_partitioning_choice(self):
        """The partitioning choice selected by default.

        Valid values: none, alongside, erase, replace, manual
        """
        return self._get_option("initial_partitioning_choice")

    @property
    def initial_swap_choice(self):
        """The swap choice selected by default."""
        return self._get_option("initial_swap_choice")

    @property
    def allow_manual_partitioning(self):
        """Allow the manual partitioning."""
        return self._get_option("allow_manual_partitioning")

    @property
    def available_file_system_types(self):
        """File system types offered for the erase mode.

        The first type is selected by default.

        For example: ext4 btrfs xfs
        """
        return self._get_option("available_file_system_types")

    @property
    def required_partition_table_type(self):
        """Required types of partition tables.

        For example: gpt msdos
        """
        return self._get_option("required_partition_table_type")

    @property
    def efi_system_partition(self):
        """Mount point of the EFI system partition."""
        return self._get_option("efi_system_partition")

    @property
    def efi_system_partition_size(self):
        """Size of the EFI system partition.

        For example: 300MiB
        """
        return self._get_option("efi_system_partition_size")

    @property
    def efi_system_partition_name(self):
        """Label of the EFI system partition."""
        return self._get_option("efi_system_partition_name")


class PartitioningConfiguration(Configuration):
    """Configuration of the partitioning module."""

    def __init__(self):
        super().__init__()
        self._partitioning = self._add_section(
            PartitioningSection,
            constants.PARTITIONING_SECTION
        )

    @property
    def partitioning(self):
        """The Partitioning section."""
        return self._partitioning

    def get_configuration_map(self):
        """Get the configuration map of the partitioning module.

        :return: a dictionary with the configuration
        :raises: ConfigurationDataError
        """
        return self._partitioning.get_configuration_map()
