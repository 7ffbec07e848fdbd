"""
User-facing terminal output for run-uefi-app.

Info lines go to stdout, errors to stderr. On a terminal they are rendered
through prompt_toolkit so the prefixes are coloured; when the stream is
redirected they are written with plain print().
"""

import subprocess
import sys

from prompt_toolkit import print_formatted_text
from prompt_toolkit.formatted_text import FormattedText
from prompt_toolkit.styles import Style

console_style = Style.from_dict({
    "info": "ansicyan bold",
    "error": "ansired bold",
    "rule": "ansibrightblack",
    "command": "ansigreen",
})


def _emit(fragments, file, end="\n"):
    """Writes (style, text) fragments, styled only when file is a terminal."""
    if file.isatty():
        print_formatted_text(FormattedText(fragments), style=console_style, file=file, end=end, flush=True)
    else:
        print("".join(text for _, text in fragments), file=file, end=end, flush=True)


def info(message):
    _emit([("class:info", "Info: "), ("", message)], sys.stdout)


def error(message):
    _emit([("class:error", "Error: "), ("", message)], sys.stderr)


def listing(title, items):
    """Prints a titled bullet list, one item per line."""
    fragments = [("", f"{title}\n")]
    for item in items:
        fragments.append(("", f"  - {item}\n"))
    _emit(fragments, sys.stdout, end="")


def format_command(args):
    """Formats a command line with one shell-quoted argument per continuation line."""
    formatted_command = f"{args[0]} \\\n"
    formatted_command += " \\\n".join([f"    {subprocess.list2cmdline([arg])}" for arg in args[1:]])
    return formatted_command


def command(args):
    _emit([
        ("class:rule", "--- Starting QEMU with the following command ---\n"),
        ("class:command", format_command(args) + "\n"),
        ("class:rule", "-" * 50),
    ], sys.stdout)
