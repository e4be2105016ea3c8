"""
Versioning for shaderpack. The release number is hard-coded below; when
running from a git checkout, the commit count and hash are appended.
"""

import logging
import subprocess
from pathlib import Path


# Bump before each release. setup.py reads this line.
__version__ = "0.1.0"


logger = logging.getLogger("shaderpack")

# The repo root when running from a checkout, None for installed copies.
repo_dir = Path(__file__).parents[1]
repo_dir = repo_dir if repo_dir.joinpath(".git").is_dir() else None


def get_version():
    """Get the version string."""
    if repo_dir:
        return get_extended_version()
    return __version__


def get_extended_version():
    """Get the version string, extended with information from git."""
    tag, post, labels = describe_checkout()
    base_release = ".".join(__version__.split(".")[:3])
    if tag and tag != base_release:
        logger.warning(
            f"shaderpack version from git ({tag}) and __version__ ({base_release}) don't match."
        )
    version = base_release
    if post and post != "0":
        version += f".post{post}"
    if labels:
        version += "+" + ".".join(labels)
    return version


def describe_checkout():
    """Get (tag, post, labels) from ``git describe``.

    ``post`` is the number of commits since the tag; ``labels`` holds the
    git hash and optionally "dirty". Missing parts are None.
    """
    command = ["git", "describe", "--long", "--always", "--tags", "--dirty"]
    try:
        p = subprocess.run(command, cwd=repo_dir, capture_output=True)
    except OSError as err:
        logger.warning(f"Could not run git to get shaderpack version: {err}")
        return None, None, ["unknown"]

    if p.returncode:
        stderr = p.stderr.decode(errors="ignore").strip()
        logger.warning(f"Could not get shaderpack version from git: {stderr}")
        return None, None, ["unknown"]

    parts = p.stdout.decode(errors="ignore").strip().lstrip("v").split("-")
    if len(parts) <= 2:
        # Untagged repo: only the hash and maybe 'dirty'
        return None, None, parts
    tag, post, *labels = parts
    return tag, post, labels


def _to_version_info(version):
    info = []
    for part in version.split("+")[0].split("."):
        if not part.isnumeric():
            break
        info.append(int(part))
    return tuple(info)


__version__ = get_version()
version_info = _to_version_info(__version__)
