"""
Host environment path lookups.

The offline package cache lives under the machine's "Program Files"
directory. The expected location is resolved once per process; when the
directory cannot be determined the offline cache check is disabled.
"""

import logging
import ntpath
import os
from functools import lru_cache
from typing import Optional


logger = logging.getLogger(__name__)

PROGRAM_FILES_ENV_VAR = 'ProgramFiles'
OFFLINE_PACKAGES_SUBPATH = ('Microsoft SDKs', 'NuGetPackages')


def get_program_files_dir() -> str:
    """
    Look up the host's Program Files directory.

    Returns:
        Directory path as configured in the environment

    Raises:
        OSError: If the directory is not configured on this host
    """
    program_files = os.environ.get(PROGRAM_FILES_ENV_VAR)
    if not program_files:
        raise OSError(f"{PROGRAM_FILES_ENV_VAR} is not set on this host")
    return program_files


@lru_cache(maxsize=None)
def expected_offline_packages_path() -> Optional[str]:
    """
    Get the expected location of the offline package cache.

    Computed at most once per process. Returns None if the Program Files
    directory cannot be determined, which disables the offline check.
    """
    try:
        program_files = get_program_files_dir()
        return ntpath.join(program_files, *OFFLINE_PACKAGES_SUBPATH)
    except Exception as e:
        logger.debug(f"Offline package path unavailable: {e}")
        return None


def trim_trailing_separators(path: Optional[str]) -> Optional[str]:
    """Strip trailing backslashes and forward slashes from a path."""
    if path is None:
        return None
    return path.rstrip('\\/')
