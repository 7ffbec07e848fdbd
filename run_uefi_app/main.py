import argparse
import sys

from . import config as app_config, console, launcher, logging_utils, manifest, selector
from .environment import HostEnvironment
from .errors import RunnerError


def build_parser():
    parser = argparse.ArgumentParser(
        prog="run-uefi-app",
        description="Boot a compiled UEFI application from the current Cargo project in QEMU.",
        epilog="Arguments after '--' are passed to QEMU unchanged.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--bin", metavar="NAME", help="Binary target to run. Use 'list' to show the candidates.")
    parser.add_argument("--list-bins", action="store_true", help="Show the binary targets of this project and exit.")
    profile_group = parser.add_mutually_exclusive_group()
    profile_group.add_argument("--release", action="store_const", dest="profile", const="release",
                               help="Run the artifact built with the release profile.")
    profile_group.add_argument("--profile", default=app_config.BUILD_PROFILE,
                               help=f"Build profile directory to take the artifact from. Default: {app_config.BUILD_PROFILE}.")
    parser.set_defaults(profile=app_config.BUILD_PROFILE)
    parser.add_argument("--debug-log", metavar="FILE", help="Write timestamped diagnostic messages to FILE.")

    suppressed_args = {
        "target_triple": app_config.TARGET_TRIPLE, "qemu_executable": app_config.QEMU_EXECUTABLE,
        "ovmf_path": None, "staging_dir": None,
    }
    for arg, default_val in suppressed_args.items():
        cli_arg = f"--{arg.replace('_', '-')}"
        parser.add_argument(cli_arg, default=default_val, help=argparse.SUPPRESS)
    return parser


def split_passthrough_args(argv):
    """Splits argv at the first '--' into our own arguments and QEMU's."""
    if "--" in argv:
        index = argv.index("--")
        return argv[:index], argv[index + 1:]
    return argv, []


def run(argv=None, env=None):
    """Runs the whole pipeline and returns the process exit status."""
    own_args, qemu_args = split_passthrough_args(list(sys.argv[1:] if argv is None else argv))
    args = build_parser().parse_args(own_args)
    env = env or HostEnvironment()
    try:
        logging_utils.configure_debug_log(args.debug_log)
    except OSError as e:
        console.error(f"Could not open debug log '{args.debug_log}': {e.strerror or e}")
        return app_config.SETUP_FAILURE_EXIT_CODE

    try:
        project_root = manifest.find_project_root(env.current_dir())
        candidates = manifest.resolve_candidates(project_root)

        if args.list_bins or (args.bin == "list" and "list" not in candidates):
            console.listing(f"Binary targets in '{project_root}':", candidates)
            return 0

        binary_name = selector.select_target(candidates, args.bin)
        console.info(f"Selected binary '{binary_name}' from project at {project_root}")

        return launcher.launch(
            project_root, binary_name, qemu_args, env=env,
            target_triple=args.target_triple, profile=args.profile,
            firmware_path=args.ovmf_path, qemu_executable=args.qemu_executable,
            temp_dir=args.staging_dir,
        )
    except RunnerError as e:
        console.error(str(e))
        return app_config.SETUP_FAILURE_EXIT_CODE


def main():
    """Parses command-line arguments, resolves the binary and boots it."""
    sys.exit(run())
