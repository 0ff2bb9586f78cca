"""Pure rendering functions: zone results -> HTML strings.

All renderers follow the same pattern:
  - Input: dataclasses from ``isochrones`` (or plain values)
  - Output: str (HTML fragment, or a full page for ``build_page``)
  - No side effects, no I/O, no Prefect decorators

Used by flows/zones.py which writes the page to disk.

Public API:
  - zones_map: build_zones_map_html, build_page
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
