# --- Project Layout ---

# The manifest file that marks a project root and declares its binaries.
MANIFEST_FILE = "Cargo.toml"
# The target triple the UEFI application is compiled for.
TARGET_TRIPLE = "x86_64-unknown-uefi"
# The build profile directory under target/<triple>/ used when none is requested.
BUILD_PROFILE = "debug"
# The file extension cargo gives UEFI executables.
ARTIFACT_EXTENSION = ".efi"

# --- Firmware & Emulator ---

# The OVMF firmware image expected directly under the project root.
FIRMWARE_FILE = "OVMF.fd"
# The QEMU system emulator looked up on PATH.
QEMU_EXECUTABLE = "qemu-system-x86_64"

# --- Boot Image Staging ---

# Name of the directory under the system temp dir exposed to QEMU as a FAT drive.
STAGING_ROOT_NAME = "UEFI"
# Firmware boot path inside the FAT drive, per the UEFI removable media layout.
BOOT_SUBPATH = ("EFI", "BOOT")
# Default boot loader file name the firmware loads on x86_64.
BOOT_LOADER_NAME = "BOOTX64.EFI"

# --- Exit Codes ---

# Returned when anything before the emulator starts fails.
SETUP_FAILURE_EXIT_CODE = 1
# Returned when the user interrupts the wait on QEMU.
INTERRUPTED_EXIT_CODE = 130

# Glob metacharacters that turn a workspace member entry into a pattern.
MEMBER_GLOB_CHARS = "*?["
