from __future__ import annotations

import sys

if sys.version_info < (3, 11):
    from typing_extensions import Any, Self
else:
    from typing import Any, Self

__all__ = ("Any", "Self")
