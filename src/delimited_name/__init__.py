"""Delimited Name - Hierarchical names with escaped components

This package provides a name value type made of masked components joined
by a configurable delimiter, with two interchangeable storage variants
and design-by-contract checks on every operation.
"""

from .contracts import (
    NameContractError,
    InvalidArgumentError,
    IndexOutOfRangeError,
    InvalidInternalStateError,
    OperationFailedError,
)
from .escaping import DEFAULT_DELIMITER, ESCAPE_CHARACTER
from .name import AbstractName, StringArrayName, StringName
from .files import Directory, File, FileState, Node, RootNode

__version__ = "0.1.0"

__all__ = [
    "AbstractName",
    "StringArrayName",
    "StringName",
    "DEFAULT_DELIMITER",
    "ESCAPE_CHARACTER",
    "NameContractError",
    "InvalidArgumentError",
    "IndexOutOfRangeError",
    "InvalidInternalStateError",
    "OperationFailedError",
    "Node",
    "Directory",
    "RootNode",
    "File",
    "FileState",
]
