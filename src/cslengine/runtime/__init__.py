"""Rendering runtime.

Provides the render context, the token buffer, behaviors and the minimal
Text and Group nodes. Depends on the model package for items, locales and
styles.

Python 3.13+.
"""

from .behavior import (
    Behavior,
    StripPeriods,
    TextCaseBehavior,
    TokenTransform,
    apply_behaviors,
    behaviors_from_attributes,
    compose,
)
from .nodes import Group, Text
from .render_context import RenderContext, VariableCounters
from .tokens import Token, TokenBuffer
from .variables import DateVariable, NameVariable, StringVariable, VariableKind

__all__ = [
    "Behavior",
    "DateVariable",
    "Group",
    "NameVariable",
    "RenderContext",
    "StringVariable",
    "StripPeriods",
    "Text",
    "TextCaseBehavior",
    "Token",
    "TokenBuffer",
    "TokenTransform",
    "VariableCounters",
    "VariableKind",
    "apply_behaviors",
    "behaviors_from_attributes",
    "compose",
]
