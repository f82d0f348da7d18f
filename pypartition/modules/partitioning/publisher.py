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
from pypartition.loggers import get_module_logger
from pypartition.modules.partitioning.names import INSTALL_CHOICE_NAMES, SWAP_CHOICE_NAMES

log = get_module_logger(__name__)

__all__ = ["publish_partition_choices", "publish_required_partition_table_types",
           "publish_efi_configuration", "publish_required_storage"]

# The global storage might not be available yet. That's fine,
# the publishers just skip the update.


def publish_partition_choices(storage, install_choice, swap_choice):
    """Publish the current partitioning choices.

    :param storage: a global storage or None
    :param install_choice: an install choice
    :param swap_choice: a swap choice
    """
    if storage is None:
        return

    storage.insert(constants.GS_PARTITION_CHOICES, {
        constants.PARTITION_CHOICES_INSTALL: INSTALL_CHOICE_NAMES.find_name(install_choice),
        constants.PARTITION_CHOICES_SWAP: SWAP_CHOICE_NAMES.find_name(swap_choice),
    })


def publish_required_partition_table_types(storage, table_types):
    """Publish the required types of partition tables.

    :param storage: a global storage or None
    :param table_types: a list of strings
    """
    if storage is None:
        return

    storage.insert(constants.GS_REQUIRED_PARTITION_TABLE_TYPE, list(table_types))


def publish_efi_configuration(storage, firmware_type, mount_point, size=None, name=None):
    """Publish the firmware type and the EFI system partition.

    The size and the name are published only if they are set.

    :param storage: a global storage or None
    :param firmware_type: "efi" or "bios"
    :param mount_point: a mount point of the EFI system partition
    :param size: a string with the size or None
    :param name: a string with the partition label or None
    """
    if storage is None:
        return

    storage.insert(constants.GS_FIRMWARE_TYPE, firmware_type)
    storage.insert(constants.GS_EFI_SYSTEM_PARTITION, mount_point)

    if size is not None:
        storage.insert(constants.GS_EFI_SYSTEM_PARTITION_SIZE, size)

    if name is not None:
        storage.insert(constants.GS_EFI_SYSTEM_PARTITION_NAME, name)


def publish_required_storage(storage, required_gib):
    """Publish the required storage if nobody else did.

    The value of another module, for example of the welcome
    screen, is never overwritten.

    :param storage: a global storage or None
    :param required_gib: required storage in GiB or a negative number
    :return: True if the value was published, otherwise False
    """
    if storage is None or required_gib < 0:
        return False

    if storage.contains(constants.GS_REQUIRED_STORAGE):
        log.debug("The required storage is already set.")
        return False

    storage.insert(constants.GS_REQUIRED_STORAGE, required_gib)
    return True
