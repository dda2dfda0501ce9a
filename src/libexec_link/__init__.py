"""
libexec_link

Startup helper that keeps ``<install root>/libexec`` pointing at the support
directory of the system git:
- ask git where its helper programs live (``git --exec-path``)
- derive the install root from the running executable
- (re)create the ``libexec`` symlink, idempotently
"""

from __future__ import annotations

from .ensure import ensure_support_symlink
from .errors import SupportLinkError
from .layout import SupportLayout

__all__ = ["SupportLayout", "SupportLinkError", "__version__", "ensure_support_symlink"]

__version__ = "0.1.0"
