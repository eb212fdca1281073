"""
Feed parsers module.
"""

from parsers.stock_parser import (
    parse_stock_file,
    parse_stock_lines,
    StockParseResult,
)

__all__ = [
    "parse_stock_file",
    "parse_stock_lines",
    "StockParseResult",
]
