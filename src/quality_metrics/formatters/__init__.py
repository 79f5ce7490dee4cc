"""Report formatters, looked up by output format name."""

from typing import Dict, Type

from .base import BaseFormatter
from .csv_formatter import CsvFormatter
from .json_formatter import JsonFormatter
from .rich_formatter import RichFormatter

FORMATTERS: Dict[str, Type[BaseFormatter]] = {
    "rich": RichFormatter,
    "csv": CsvFormatter,
    "json": JsonFormatter,
}


def get_formatter(name: str) -> BaseFormatter:
    """Instantiate the formatter registered as ``name`` (case-insensitive).

    Raises:
        ValueError: If no formatter has that name
    """
    try:
        formatter_cls = FORMATTERS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown output format {name!r}; expected one of {', '.join(sorted(FORMATTERS))}"
        ) from None
    return formatter_cls()


__all__ = [
    "FORMATTERS",
    "BaseFormatter",
    "CsvFormatter",
    "JsonFormatter",
    "RichFormatter",
    "get_formatter",
]
