import os
import tempfile
from pathlib import Path


class HostEnvironment:
    """Reads the process-wide state the launcher depends on.

    Resolution and selection never touch this; only root discovery and the
    launcher do, so tests can hand in a FakeEnvironment-style object instead.
    """

    def current_dir(self):
        return Path.cwd()

    def search_path(self):
        """Returns the directories listed in PATH, in order."""
        return [Path(entry) for entry in os.environ.get("PATH", "").split(os.pathsep) if entry]

    def temp_dir(self):
        return Path(tempfile.gettempdir())
