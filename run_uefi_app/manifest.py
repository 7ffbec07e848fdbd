import logging
import tomllib
from pathlib import Path

from . import config as app_config
from .errors import ManifestParseError, ManifestUnreadable, ProjectRootNotFound

logger = logging.getLogger(__name__)


def find_project_root(start_dir, manifest_name=None):
    """Walks up from start_dir to the first directory holding the manifest."""
    manifest_name = manifest_name or app_config.MANIFEST_FILE
    start_dir = Path(start_dir)
    for directory in [start_dir, *start_dir.parents]:
        if (directory / manifest_name).is_file():
            logger.debug("Project root found at %s", directory)
            return directory
    raise ProjectRootNotFound(start_dir, manifest_name)


def load_manifest(path):
    """Reads and parses a TOML manifest into a dict."""
    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as e:
        raise ManifestParseError(path, e) from e
    except OSError as e:
        raise ManifestUnreadable(path, e.strerror or e) from e


# --- Candidate Resolution ---

def resolve_candidates(root_path, load=load_manifest):
    """
    Returns the ordered, de-duplicated binary names a project tree can run.

    Precedence, highest first: candidates gathered from workspace members,
    then the names of the [[bin]] entries, then [package].name. Errors reading
    the manifest at root_path propagate; errors in member manifests only drop
    that member.

    Args:
        root_path: Directory containing the manifest.
        load: Callable taking a manifest path and returning its parsed dict.
              Must raise ManifestUnreadable or ManifestParseError on failure.

    Returns:
        A list of binary names, possibly empty.
    """
    return _resolve(Path(root_path), load, frozenset())


def _resolve(root_path, load, visiting):
    manifest = load(root_path / app_config.MANIFEST_FILE)
    visiting = visiting | {root_path.resolve()}

    names = _workspace_candidates(manifest, root_path, load, visiting)
    if names:
        logger.debug("%s: %d candidate(s) from workspace members", root_path, len(names))
        return names

    names = _bin_candidates(manifest)
    if names:
        logger.debug("%s: %d candidate(s) from [[bin]] entries", root_path, len(names))
        return names

    return _package_candidates(manifest)


def _workspace_candidates(manifest, root_path, load, visiting):
    names = []
    for member_dir in _workspace_member_dirs(manifest, root_path):
        names.extend(_member_candidates(member_dir, load, visiting))
    return _unique(names)


def _member_candidates(member_dir, load, visiting):
    """Resolves one workspace member; a broken or missing member yields nothing."""
    if member_dir.resolve() in visiting:
        logger.debug("Skipping workspace member %s: already being resolved", member_dir)
        return []
    try:
        return _resolve(member_dir, load, visiting)
    except (ManifestUnreadable, ManifestParseError) as e:
        logger.debug("Skipping workspace member %s: %s", member_dir, e)
        return []


def _workspace_member_dirs(manifest, root_path):
    """Expands workspace.members into directories, in declaration order."""
    workspace = _table(manifest, "workspace")
    members = _string_list(workspace.get("members"))
    excluded = {(root_path / entry).resolve() for entry in _string_list(workspace.get("exclude"))}

    member_dirs = []
    for entry in members:
        if Path(entry).is_absolute():
            logger.debug("Skipping workspace member '%s': not relative to %s", entry, root_path)
            continue
        if any(ch in entry for ch in app_config.MEMBER_GLOB_CHARS):
            matches = sorted(p for p in root_path.glob(entry) if p.is_dir())
            if not matches:
                logger.debug("Workspace member pattern '%s' matched nothing", entry)
            member_dirs.extend(matches)
        else:
            member_dirs.append(root_path / entry)
    return [d for d in member_dirs if d.resolve() not in excluded]


def _bin_candidates(manifest):
    entries = manifest.get("bin")
    if not isinstance(entries, list):
        return []
    names = [entry.get("name") for entry in entries if isinstance(entry, dict)]
    return _unique(name for name in names if isinstance(name, str))


def _package_candidates(manifest):
    name = _table(manifest, "package").get("name")
    return [name] if isinstance(name, str) else []


# --- Helpers ---

def _table(manifest, key):
    value = manifest.get(key)
    return value if isinstance(value, dict) else {}


def _string_list(value):
    if not isinstance(value, list):
        return []
    return [item for item in value if isinstance(item, str)]


def _unique(names):
    return list(dict.fromkeys(names))
