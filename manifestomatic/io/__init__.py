"""Public façade for the ``io`` sub-package.

Only the inventory writers are re-exported; format-specific helpers stay
private to :pymod:`manifestomatic.io.writer`.
"""

from .writer import FORMATS, output_path, write_inventory  # re-export the canonical helpers

__all__ = ["FORMATS", "output_path", "write_inventory"]
