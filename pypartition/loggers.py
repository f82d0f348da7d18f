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

# Q: Why do we have a separate module for this?
#
# A: To avoid import cycles. Every module of the package needs a logger,
#    so this module must not import anything but the constants module.

import logging

from pypartition.core import constants


def get_module_logger(module_name):
    """Return a partitioning sub-logger based on a module __name__ attribute.

    We strip the "pypartition." prefix (if any) and put the rest
    behind "partition.".
    """
    if module_name.startswith("pypartition."):
        module_name = module_name[len("pypartition."):]
    return logging.getLogger("%s.%s" % (constants.LOGGER_ROOT, module_name))
