"""Text bars for the Portuguese game screens."""

from __future__ import annotations

from rdpquest.console import health_bar as _life_bar


def health_bar(label: str, current: float, maximum: float) -> str:
    """Return a life bar such as ``Heroi - [++++----...] (40.00/100.00)``, with no line break."""
    return _life_bar(label, current, maximum)