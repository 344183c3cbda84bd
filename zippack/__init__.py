"""zippack - archive a build output directory into a single ZIP file.

Intended to run once after a bundler build completes.
"""

__version__ = "0.1.0"
__author__ = "zippack Contributors"

from zippack.config import PackOptions, Settings, get_settings

__all__ = ["PackOptions", "Settings", "get_settings", "__version__"]
