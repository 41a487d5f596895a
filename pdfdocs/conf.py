"""
Settings access for pdfdocs.

Every setting is read from the Django settings module with a ``PDFDOCS_``
prefix and falls back to the defaults below.
"""

from pathlib import Path
from typing import Any

from django.conf import settings


DEFAULTS = {
    'OUTPUT_DIR': None,  # resolved against BASE_DIR in get_output_dir()
    'FONT_DIRS': [],
    'DEBUG_BORDERS': False,
    'PREVIEW_DPI': 72,
    'PREVIEW_EXTENSION': 'jpg',
    'DIR_MODE': 0o755,
}

SETTING_PREFIX = 'PDFDOCS_'


def get_setting(name: str) -> Any:
    """
    Get a pdfdocs setting.
    
    Args:
        name: Setting name without prefix (e.g., 'OUTPUT_DIR')
        
    Returns:
        The configured value or the default
        
    Raises:
        KeyError: If the setting is unknown
    """
    if name not in DEFAULTS:
        raise KeyError(f"Unknown pdfdocs setting '{name}'")
    return getattr(settings, f"{SETTING_PREFIX}{name}", DEFAULTS[name])


def get_base_dir() -> Path:
    """Project base directory (settings.BASE_DIR, or the working directory)"""
    return Path(getattr(settings, 'BASE_DIR', Path.cwd()))


def get_output_dir() -> Path:
    """Root directory for generated PDF files"""
    output_dir = get_setting('OUTPUT_DIR')
    if output_dir is None:
        return get_base_dir() / 'var' / 'pdf'
    return Path(output_dir)
