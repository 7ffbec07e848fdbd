import logging
import os
import shutil
import subprocess
from pathlib import Path

from . import config as app_config
from . import console
from .environment import HostEnvironment
from .errors import (
    ArtifactNotFound,
    EmulatorNotFound,
    EmulatorStartError,
    FirmwareNotFound,
    StagingIOError,
)

logger = logging.getLogger(__name__)


# --- Locating Inputs ---

def artifact_path(project_root, binary_name, target_triple=app_config.TARGET_TRIPLE, profile=app_config.BUILD_PROFILE):
    """Returns where cargo writes the compiled UEFI executable for binary_name."""
    return Path(project_root) / "target" / target_triple / profile / f"{binary_name}{app_config.ARTIFACT_EXTENSION}"


def locate_artifact(project_root, binary_name, target_triple=app_config.TARGET_TRIPLE, profile=app_config.BUILD_PROFILE):
    path = artifact_path(project_root, binary_name, target_triple, profile)
    if not path.is_file():
        raise ArtifactNotFound(binary_name, path)
    return path


def locate_firmware(project_root, firmware_path=None):
    """Finds the OVMF image, by default directly under the project root."""
    path = Path(firmware_path) if firmware_path else Path(project_root) / app_config.FIRMWARE_FILE
    if not path.is_file():
        raise FirmwareNotFound(path)
    return path


def locate_emulator(env, executable=app_config.QEMU_EXECUTABLE):
    """Scans the PATH directories reported by env for the QEMU executable."""
    search_path = os.pathsep.join(str(d) for d in env.search_path())
    found = shutil.which(executable, path=search_path) if search_path else None
    if not found:
        raise EmulatorNotFound(executable)
    return Path(found)


# --- Boot Image Staging ---

def staging_root(temp_dir):
    return Path(temp_dir) / app_config.STAGING_ROOT_NAME


def stage_boot_image(app_path, temp_dir):
    """
    Copies the UEFI application into a FAT-drive layout the firmware boots.

    Creates <temp_dir>/UEFI/EFI/BOOT (existing directories are fine) and
    copies app_path to BOOTX64.EFI inside it, replacing any earlier copy.

    Returns:
        The staging root to hand to QEMU as a FAT drive.
    """
    root = staging_root(temp_dir)
    boot_dir = root.joinpath(*app_config.BOOT_SUBPATH)
    boot_loader = boot_dir / app_config.BOOT_LOADER_NAME
    try:
        boot_dir.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(app_path, boot_loader)
    except OSError as e:
        raise StagingIOError(boot_loader, e.strerror or e) from e
    logger.debug("Staged %s as %s", app_path, boot_loader)
    return root


# --- Running QEMU ---

def build_qemu_args(qemu_executable, firmware_path, boot_root, extra_args=()):
    """Constructs the QEMU command: firmware pflash, FAT boot drive, then user arguments."""
    args = [
        str(qemu_executable),
        "-drive", f"if=pflash,format=raw,readonly=on,file={firmware_path}",
        "-drive", f"format=raw,file=fat:rw:{boot_root}",
    ]
    args.extend(extra_args)
    return args


def run_qemu(args):
    """Runs QEMU in the foreground with inherited stdio and returns its exit status."""
    console.command(args)
    try:
        process = subprocess.Popen(args)
    except OSError as e:
        raise EmulatorStartError(args[0], e.strerror or e) from e
    try:
        return process.wait()
    except KeyboardInterrupt:
        console.info("Interrupted by user.")
        return app_config.INTERRUPTED_EXIT_CODE


def launch(project_root, binary_name, qemu_args=(), env=None, target_triple=app_config.TARGET_TRIPLE,
           profile=app_config.BUILD_PROFILE, firmware_path=None, qemu_executable=app_config.QEMU_EXECUTABLE,
           temp_dir=None):
    """Locates everything needed, stages the boot image and runs QEMU on it."""
    env = env or HostEnvironment()
    app_path = locate_artifact(project_root, binary_name, target_triple, profile)
    console.info(f"Using UEFI application: {app_path}")
    ovmf_path = locate_firmware(project_root, firmware_path)
    qemu_path = locate_emulator(env, qemu_executable)

    boot_root = stage_boot_image(app_path, temp_dir or env.temp_dir())
    console.info(f"Staged boot image under: {boot_root}")

    return run_qemu(build_qemu_args(qemu_path, ovmf_path, boot_root, qemu_args))
