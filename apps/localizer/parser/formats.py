from __future__ import annotations

import re
from typing import Tuple

# string.format specifiers: flags, width, precision, conversion. `%%` is a literal percent.
FORMAT_SPEC_RE = re.compile(r"%(?:%|[-+ #0]*\d*(?:\.\d+)?[cdiouxXeEfgGqsaA])")


def format_parameters(text: str) -> Tuple[str, ...]:
    """Return the format specifiers in ``text`` in order, e.g. ``("%d", "%.1f")``."""
    return tuple(m.group(0) for m in FORMAT_SPEC_RE.finditer(text) if m.group(0) != "%%")
