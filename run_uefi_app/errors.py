"""
Error taxonomy for run-uefi-app.

Every failure that stops an invocation before (or while) starting QEMU is a
RunnerError subclass. The CLI catches the base class, prints the message and
exits with the setup failure status, so the message must name the missing
resource on its own.
"""


class RunnerError(Exception):
    """Base class for all terminal setup errors."""

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def __str__(self):
        return self.message


class ProjectRootNotFound(RunnerError):
    def __init__(self, start_dir, manifest_name):
        super().__init__(f"Could not find '{manifest_name}' in '{start_dir}' or any parent directory.")
        self.start_dir = start_dir


class ManifestUnreadable(RunnerError):
    def __init__(self, path, reason):
        super().__init__(f"Could not read manifest '{path}': {reason}")
        self.path = path


class ManifestParseError(RunnerError):
    def __init__(self, path, reason):
        super().__init__(f"Could not parse manifest '{path}': {reason}")
        self.path = path


class AmbiguousTarget(RunnerError):
    """No binary was requested and the candidate set is not a single name."""

    def __init__(self, candidates):
        candidates = list(candidates)
        if candidates:
            detail = f"multiple candidates exist: {', '.join(candidates)}. Use --bin to pick one."
        else:
            detail = "no binary candidates were found in the manifest."
        super().__init__(f"Not able to determine the binary to run, {detail}")
        self.candidates = candidates


class TargetNotFound(RunnerError):
    def __init__(self, name, candidates=()):
        message = f"Binary '{name}' is not declared in this project."
        if candidates:
            message += f" Available: {', '.join(candidates)}"
        super().__init__(message)
        self.name = name


class ArtifactNotFound(RunnerError):
    def __init__(self, name, path):
        super().__init__(f"Compiled artifact for '{name}' not found at: {path} (build it first)")
        self.name = name
        self.path = path


class FirmwareNotFound(RunnerError):
    def __init__(self, path):
        super().__init__(f"UEFI firmware file not found at: {path}")
        self.path = path


class EmulatorNotFound(RunnerError):
    def __init__(self, executable):
        super().__init__(f"Could not find QEMU executable '{executable}' in any PATH directory.")
        self.executable = executable


class StagingIOError(RunnerError):
    def __init__(self, path, reason):
        super().__init__(f"Failed to stage boot image at '{path}': {reason}")
        self.path = path


class EmulatorStartError(RunnerError):
    def __init__(self, executable, reason):
        super().__init__(f"Failed to start QEMU executable '{executable}': {reason}")
        self.executable = executable
