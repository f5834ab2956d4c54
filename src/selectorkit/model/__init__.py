from __future__ import annotations

from selectorkit.model.rectangle import Rectangle

__all__ = ["Rectangle"]
