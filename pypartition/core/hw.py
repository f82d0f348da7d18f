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
import os

from pypartition.core.constants import EFI_FIRMWARE_PATH, FIRMWARE_TYPE_BIOS, \
    FIRMWARE_TYPE_EFI
from pypartition.loggers import get_module_logger

log = get_module_logger(__name__)


def is_efi():
    """Has the system been booted with the EFI firmware interface?

    :return: True or False
    """
    return os.path.exists(EFI_FIRMWARE_PATH)


def get_firmware_type():
    """Get the type of the firmware.

    The bootloader setup expects one of the strings "efi" and "bios".

    :return: a string with the firmware type
    """
    firmware_type = FIRMWARE_TYPE_EFI if is_efi() else FIRMWARE_TYPE_BIOS
    log.debug("Detected the '%s' firmware.", firmware_type)
    return firmware_type
