#!/usr/bin/env python3
"""
This script serves as the executable entry point for the run-uefi-app application.

Its sole purpose is to configure the Python path to include the project's root
directory, allowing the `run_uefi_app` package to be imported, and then to
execute the main function from the `run_uefi_app.main` module. It can be set as
the cargo runner for the x86_64-unknown-uefi target.
"""

import sys
from pathlib import Path

# The script is in `bin/`, so the project root is two levels up.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from run_uefi_app.main import main

if __name__ == "__main__":
    main()
