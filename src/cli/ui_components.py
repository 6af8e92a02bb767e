"""Componentes de UI para CLI (Rich).

Todo lo visual va a stderr; stdout solo lleva el blob codificado.
"""

from __future__ import annotations

from rich.panel import Panel
from rich.text import Text

from core.errors import TokenMetadataError


def build_error_panel(exc: TokenMetadataError) -> Panel:
    """Panel con la categoría y el mensaje del error."""

    title = Text(exc.category.capitalize(), style="bold red")
    body = Text(str(exc))
    return Panel(body, title=title, border_style="red")
