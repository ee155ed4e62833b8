"""Report renderers.

Usage:
    from react_state_patterns.render import render_markdown, render_text

    text = render_text(result, color=True)   # terminal report
    md = render_markdown(result)             # Markdown report
"""

from __future__ import annotations

from react_state_patterns.render.markdown import render_markdown
from react_state_patterns.render.text import render_text

__all__ = ["render_markdown", "render_text"]
