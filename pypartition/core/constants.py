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

# Root of the logger hierarchy.
LOGGER_ROOT = "partition"

# Keys of the configuration map.
CONFIG_REQUIRED_STORAGE = "requiredStorage"
CONFIG_USER_SWAP_CHOICES = "userSwapChoices"
CONFIG_ENSURE_SUSPEND_TO_DISK = "ensureSuspendToDisk"
CONFIG_NEVER_CREATE_SWAP = "neverCreateSwap"
CONFIG_INITIAL_PARTITIONING_CHOICE = "initialPartitioningChoice"
CONFIG_INITIAL_SWAP_CHOICE = "initialSwapChoice"
CONFIG_ALLOW_MANUAL_PARTITIONING = "allowManualPartitioning"
CONFIG_AVAILABLE_FILE_SYSTEM_TYPES = "availableFileSystemTypes"
CONFIG_REQUIRED_PARTITION_TABLE_TYPE = "requiredPartitionTableType"
CONFIG_EFI_SYSTEM_PARTITION = "efiSystemPartition"
CONFIG_EFI_SYSTEM_PARTITION_SIZE = "efiSystemPartitionSize"
CONFIG_EFI_SYSTEM_PARTITION_NAME = "efiSystemPartitionName"

# The deprecated swap settings.
LEGACY_SWAP_KEYS = (
    CONFIG_ENSURE_SUSPEND_TO_DISK,
    CONFIG_NEVER_CREATE_SWAP,
)

# Keys of the global storage.
GS_PARTITION_CHOICES = "partitionChoices"
GS_FIRMWARE_TYPE = "firmwareType"
GS_EFI_SYSTEM_PARTITION = "efiSystemPartition"
GS_EFI_SYSTEM_PARTITION_SIZE = "efiSystemPartitionSize"
GS_EFI_SYSTEM_PARTITION_NAME = "efiSystemPartitionName"
GS_REQUIRED_PARTITION_TABLE_TYPE = "requiredPartitionTableType"
GS_REQUIRED_STORAGE = "requiredStorageGiB"

# Keys of the partition choices record.
PARTITION_CHOICES_INSTALL = "install"
PARTITION_CHOICES_SWAP = "swap"

# Firmware types.
FIRMWARE_TYPE_EFI = "efi"
FIRMWARE_TYPE_BIOS = "bios"

# Use -1 to indicate that the required storage is unset.
REQUIRED_STORAGE_UNSET = -1.0

# Defaults of the legacy swap settings.
DEFAULT_ENSURE_SUSPEND_TO_DISK = True
DEFAULT_NEVER_CREATE_SWAP = False

DEFAULT_ALLOW_MANUAL_PARTITIONING = True
DEFAULT_EFI_SYSTEM_PARTITION = "/boot/efi"

# Where to look for the firmware interface.
EFI_FIRMWARE_PATH = "/sys/firmware/efi"

# The name of the configuration section.
PARTITIONING_SECTION = "Partitioning"
