"""
Utils package - Shared utility functions.
"""

from utils.logger import setup_logging, setup_logging_from_settings, get_logger
from utils.paths import expected_offline_packages_path, get_program_files_dir

__all__ = [
    'setup_logging',
    'setup_logging_from_settings',
    'get_logger',
    'expected_offline_packages_path',
    'get_program_files_dir',
]
