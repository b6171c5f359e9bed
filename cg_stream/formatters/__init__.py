"""Output formatter registry.

FORMATTERS maps the keys accepted by ``--formats`` and
CG_STREAM_DEFAULT_FORMATS to formatter classes. Callers instantiate:
``FORMATTERS["json"]()``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cg_stream.formatters.cg_text import CGStreamFormatter
from cg_stream.formatters.json_view import JSONFormatter

if TYPE_CHECKING:
    from cg_stream.formatters.base import BaseFormatter

FORMATTERS: dict[str, type[BaseFormatter]] = {
    "cg": CGStreamFormatter,
    "json": JSONFormatter,
}
