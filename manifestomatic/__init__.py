"""
manifestomatic package initialisation.

The module performs two small tasks:

1. **Expose the version string**
   ``manifestomatic.__version__`` is resolved at import-time from the
   installed distribution metadata.

2. **Re-export the public entry points**
   :func:`load_manifest`, :func:`expand_manifest` and :func:`expand_file`
   are available at the top level::

       from manifestomatic import expand_file
"""

from importlib.metadata import PackageNotFoundError, version

# --------------------------------------------------------------------------- #
# Version resolution
# --------------------------------------------------------------------------- #
try:
    __version__: str = version("manifestomatic")
except PackageNotFoundError:
    # Source tree without an installed wheel.
    __version__ = "0.0.0"

# --------------------------------------------------------------------------- #
# Public re-exports
# --------------------------------------------------------------------------- #
from .config import load_manifest  # noqa: E402
from .expander import expand_file, expand_manifest  # noqa: E402

__all__: list[str] = ["load_manifest", "expand_manifest", "expand_file", "__version__"]
