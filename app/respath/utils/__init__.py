"""Utility modules for respath.

This module exports commonly used utility functions.
"""

from respath.utils.formatting import (
    console,
    create_entry_table,
    create_root_table,
    err_console,
    print_error,
    print_info,
    print_success,
    print_warning,
)

__all__ = [
    "console",
    "create_entry_table",
    "create_root_table",
    "err_console",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
]
