# verfmt/__init__.py

# © 2025 The verfmt Authors. All rights reserved.

__version__ = '1.0.0'

from .core.version_formatter import VersionFormatter
from .config.formatter_config import VersionFormatParams
from .utils.formatter import format_version
from .utils.radix import to_radix_string
from .utils.logger import logger, setup_logging

__all__ = [
    "VersionFormatter",
    "VersionFormatParams",
    "format_version",
    "to_radix_string",
    "logger",
    "setup_logging",
    "__version__",
]
