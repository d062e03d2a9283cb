"""Saves generated type definitions to disk."""

import logging
import os
import platform
from dataclasses import dataclass
from typing import Any, Dict, Optional

from quicktypegen.constants import DEFAULT_SAVE_DIR_NAME, TYPESCRIPT_EXTENSION

# Configure module logger
logger = logging.getLogger(__name__)


@dataclass
class SaveResult:
    """Outcome of saving a type definition file."""
    success: bool
    file_path: Optional[str] = None
    error: Optional[str] = None


def get_default_save_path() -> str:
    """Returns the default directory for saved type files."""
    return os.path.join(os.path.expanduser('~'), DEFAULT_SAVE_DIR_NAME)


def save_type_file(content: str, file_name: str, save_path: Optional[str] = None) -> SaveResult:
    """
    Writes type definitions to a .ts file.

    Args:
        content (str): The rendered type definitions.
        file_name (str): File name; '.ts' is appended when missing.
        save_path (str): Target directory (defaults to ~/quick-type-types).

    Returns:
        SaveResult: success flag with the absolute file path, or the error message.
    """
    if not file_name.endswith(TYPESCRIPT_EXTENSION):
        file_name += TYPESCRIPT_EXTENSION
    target_path = os.path.abspath(save_path) if save_path else get_default_save_path()
    full_path = os.path.join(target_path, file_name)
    try:
        os.makedirs(target_path, exist_ok=True)
        with open(full_path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        logger.warning("Could not save %s: %s", full_path, e)
        return SaveResult(success=False, error=str(e))
    logger.info("Saved type definitions to %s", full_path)
    return SaveResult(success=True, file_path=full_path)


def is_writable(dir_path: str) -> bool:
    """Checks whether a file can be created in a directory."""
    test_file = os.path.join(dir_path, '.write-test')
    try:
        with open(test_file, 'w', encoding='utf-8') as f:
            f.write('test')
        os.remove(test_file)
        return True
    except OSError:
        return False


def get_system_info() -> Dict[str, Any]:
    """Describes where type files are saved on this machine."""
    home_dir = os.path.expanduser('~')
    return {
        'platform': platform.system().lower(),
        'home_dir': home_dir,
        'default_save_path': get_default_save_path(),
        'is_writable': is_writable(home_dir),
    }
