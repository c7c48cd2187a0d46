# Argpars Command Line Argument Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes used by Argpars.

Parsing itself never raises: an unrecognized token is reported through
`ArgsParser.wrong_arguments_passed()` and the exit code returned by
`ArgsParser.pars()`. Exceptions are reserved for the configuration layer,
where a broken config file is a developer-facing problem.

Exception Hierarchy:
- ArgparsError
    └── ConfigError
"""


class ArgparsError(Exception):
    """Base exception for Argpars."""


class ConfigError(ArgparsError):
    """Exception raised when a parser config file cannot be loaded or validated."""
