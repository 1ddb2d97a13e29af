"""Compatibility layer for command-shaped and legacy declarations.

Architecture Note:
    compat/ sits on top of project/. Nothing in core/, project/ or
    composition/ imports from here.
"""

from g4compose.compat.arguments import ParsedArguments, parse_arguments
from g4compose.compat.commands import COMMANDS, CallSite, call
from g4compose.compat.legacy import (
    add_compile_definitions,
    define_module,
    global_library_target,
    library_target,
)

__all__ = [
    # Arguments
    "ParsedArguments",
    "parse_arguments",
    # Commands
    "COMMANDS",
    "CallSite",
    "call",
    # Legacy
    "add_compile_definitions",
    "define_module",
    "global_library_target",
    "library_target",
]
