"""
Argpars Command Line Argument Parser

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .argument import ArgumentSpec, HelpSection
from .help_info import HelpInfo
from .parser import EXIT_FAILURE, EXIT_SUCCESS, ArgsParser
from .version import __version__

logger = logging.getLogger("argpars")


__all__ = [
    "ArgsParser",
    "ArgumentSpec",
    "HelpInfo",
    "HelpSection",
    "EXIT_SUCCESS",
    "EXIT_FAILURE",
    "__version__",
]
