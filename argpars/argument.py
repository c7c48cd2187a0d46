# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the records stored by `ArgsParser`.

- `ArgumentSpec`: one registered flag and the description shown next to it
  on the help screen.
- `HelpSection`: an extra titled block of text appended to the help screen
  after the option list.

Both are frozen; the parser replaces entries instead of mutating them.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class ArgumentSpec:
    """
    Represents a registered command-line flag.

    Attributes:
        name (str): The exact flag token, e.g. `--print-stuff`.
        description (str): Help text shown next to the flag.
    """

    name: str
    description: str = ""

    @property
    def looks_like_flag(self) -> bool:
        """True if the name starts with a flag marker (`-` or `--`)."""
        return self.name.startswith("-") and self.name.strip("-") != ""

    def get_help_line(self, width: int = 30) -> str:
        """Render the `<name>  <description>` help line for this flag."""
        line = f"  {self.name:<{width}} "
        if self.description and len(self.name) > width:
            return f"{line}\n{'':<{width + 3}}{self.description}"
        return f"{line}{self.description}".rstrip()


@dataclass(frozen=True)
class HelpSection:
    """A titled block of free text rendered after the option list."""

    title: str
    content: str = ""
