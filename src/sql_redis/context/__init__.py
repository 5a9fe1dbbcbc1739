"""Template context builders, one module per statement kind.

A builder maps a matched statement to the flat ``{name: text}`` variables
its template needs, or returns None when a required piece is missing. It
never returns a partially populated context.
"""

from typing import Dict

TemplateContext = Dict[str, str]

__all__ = ["TemplateContext"]
