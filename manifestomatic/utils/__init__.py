"""
Public façade for the *utils* package.

Anything imported here becomes part of the *stable* public API.
Internal helpers live in their own modules and are **not** re-exported.
"""

from __future__ import annotations

# ─── console output ──────────────────────────────────────────────────────
from .display import echo_banner, echo_record, echo_success, render_records

# ─── logging ─────────────────────────────────────────────────────────────
from .logging import setup_logging

__all__ = [
    "echo_banner",
    "echo_record",
    "echo_success",
    "render_records",
    "setup_logging",
]
