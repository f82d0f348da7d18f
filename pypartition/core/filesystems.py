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
from pypartition.loggers import get_module_logger

log = get_module_logger(__name__)


def canonical_filesystem_name(name):
    """Get the canonical name of a file system type.

    The name is resolved by Blivet, so only file systems that
    Blivet supports have a canonical name. Unknown names resolve
    to an empty string.

    :param name: a name of the file system type
    :return: a canonical name or an empty string
    """
    # Blivet is imported here, because it requires system libraries
    # that are not needed for the rest of the configuration.
    from blivet.formats import get_format

    name = (name or "").strip().lower()

    if not name:
        return ""

    fmt_type = get_format(name).type

    if not fmt_type:
        log.warning("Unknown file system type '%s'.", name)
        return ""

    return fmt_type
