# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `HelpInfo`, the help-screen metadata supplied to `ArgsParser` when it
is constructed.

All four fields are free text and default to an empty string. They are
rendered verbatim, so `usage` should already be fully formatted by the caller:

    HelpInfo(
        usage=f"Usage: {sys.argv[0]} [OPTION]... [TEST]",
        name="Test App",
        description="This is a test description",
        version="v1.0",
    )
"""
from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class HelpInfo:
    """
    Help and version screen text.

    Attributes:
        usage (str): Usage banner printed first on the help screen.
        name (str): Program display name.
        description (str): One-line program description.
        version (str): Version string, shown on both help and version screens.
    """

    usage: str = ""
    name: str = ""
    description: str = ""
    version: str = ""

    def replace(self, **changes: str) -> HelpInfo:
        """Return a copy with the given fields changed."""
        return replace(self, **changes)
