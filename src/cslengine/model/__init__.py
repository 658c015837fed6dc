"""Data consumed by the rendering engine.

Item records, locales and styles are built by external collaborators
(record mapping, locale loading, style loading) and are read-only while
rendering.

Python 3.13+.
"""

from .item import CslDate, CslName, ItemData
from .locale import Locale, Term, merge_locale
from .style import Macro, RenderFn, RenderStep, Style

__all__ = [
    "CslDate",
    "CslName",
    "ItemData",
    "Locale",
    "Macro",
    "RenderFn",
    "RenderStep",
    "Style",
    "Term",
    "merge_locale",
]
