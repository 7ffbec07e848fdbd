#!/usr/bin/env python3
"""
Shared logging utilities for run-uefi-app.

Provides timestamped debug logging to file for diagnostic purposes.
"""

import logging

DEBUG_LOG_FORMAT = "[%(created).6f] %(name)s: %(message)s"


def configure_debug_log(debug_file_path):
    """
    Route debug records from every run_uefi_app module to a file.

    Args:
        debug_file_path: Path of the log file to append to, or None if debug
                         logging is disabled.

    Returns:
        The attached handler, or None when logging stays disabled.
    """
    if not debug_file_path:
        return None
    handler = logging.FileHandler(debug_file_path, encoding="utf-8")
    handler.setFormatter(logging.Formatter(DEBUG_LOG_FORMAT))
    package_logger = logging.getLogger("run_uefi_app")
    package_logger.setLevel(logging.DEBUG)
    package_logger.addHandler(handler)
    return handler
