# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for Argpars parsers.

A config file describes the help metadata, the registered flags and any extra
help sections, so a program can keep its CLI surface out of its code:

    usage: "Usage: {program} [OPTION]..."
    name: Test App
    description: This is a test description
    version: v1.0
    arguments:
      - name: --print-stuff
        description: display "stuff"
    sections:
      - title: "EXAMPLES:"
        content: "  {program} --print-stuff"

`{program}` is replaced with the invoked program name.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Sequence

import toml
import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from argpars.exceptions import ConfigError
from argpars.help_info import HelpInfo
from argpars.logger import logger
from argpars.parser import ArgsParser
from argpars.utils import get_program_invocation


class RawArgument(BaseModel):
    """Raw argument model for Argpars configuration."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    name: str
    description: str = ""

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Argument name must not be empty.")
        return value


class RawSection(BaseModel):
    """Raw help section model for Argpars configuration."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    title: str
    content: str = ""


class ParserConfig(BaseModel):
    """Argpars parser configuration model."""

    model_config = ConfigDict(coerce_numbers_to_str=True)

    usage: str = ""
    name: str = ""
    description: str = ""
    version: str = ""
    default_arguments: bool = True
    arguments: list[RawArgument] = Field(default_factory=list)
    sections: list[RawSection] = Field(default_factory=list)

    def to_help_info(self, program: str = "") -> HelpInfo:
        return HelpInfo(
            usage=self.usage.replace("{program}", program),
            name=self.name,
            description=self.description,
            version=self.version,
        )

    def to_parser(self, argv: Sequence[str] | None = None) -> ArgsParser:
        if argv:
            program = os.path.basename(argv[0])
        else:
            program = get_program_invocation()
        parser = ArgsParser(
            argv,
            help_info=self.to_help_info(program),
            default_arguments=self.default_arguments,
        )
        for argument in self.arguments:
            parser.add_argument(argument.name, argument.description)
        for section in self.sections:
            parser.add_help_section(
                section.title, section.content.replace("{program}", program)
            )
        return parser


def read_config(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML config file into a dictionary."""
    suffix = path.suffix
    try:
        with path.open("r", encoding="UTF-8") as config_file:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
    except (yaml.YAMLError, toml.TomlDecodeError, UnicodeDecodeError) as error:
        raise ConfigError(f"Could not parse config file '{path}': {error}") from error
    except OSError as error:
        raise ConfigError(f"Could not read config file '{path}': {error}") from error

    if raw_config is None:
        return {}
    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Configuration file must contain a dictionary.\n"
            "Example:\n"
            "name: 'My CLI'\n"
            "arguments:\n"
            "  - name: '--print-stuff'\n"
            "    description: 'display stuff'"
        )
    return raw_config


def loader(
    file_path: Path | str, argv: Sequence[str] | None = None
) -> ArgsParser:
    """
    Load an Argpars parser from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.
        argv (Sequence[str] | None): Argument vector to capture; defaults to
            `sys.argv`.

    Returns:
        ArgsParser: A parser with the configured help text and flags.

    Raises:
        ConfigError: If the file is missing, unsupported, unparsable or invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    raw_config = read_config(path)
    try:
        config = ParserConfig.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid config file '{path}': {error}") from error

    logger.debug(
        "Loaded %d argument(s) and %d section(s) from %s",
        len(config.arguments),
        len(config.sections),
        path,
    )
    return config.to_parser(argv)
