"""
Stock feed parser.

Parses the pipe-delimited stock file downloaded from the supplier FTP:

    sku|ean|name|brand|category|gender|color|size|inventory|price

Rows are grouped into one ProductGroup per (ean, color); each row becomes a
size variant of its group.
"""

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, Optional, Union
import re
import structlog

from exceptions import FeedParseError
from models.product import ProductGroup, ProductOption, ProductVariant

logger = structlog.get_logger(__name__)

# Constants
FIELD_SEPARATOR = "|"
MIN_FIELDS = 10
INVENTORY_PATTERN = re.compile(r"[+-]?[0-9]+\Z")


@dataclass
class FeedRow:
    """One accepted line of the stock feed."""
    line_number: int
    sku: str
    ean: str
    name: str
    brand: str
    category: str
    gender: str
    color: str
    size: str
    inventory: int
    price: Decimal

    @property
    def group_key(self) -> str:
        return f"{self.ean}_{self.color}"

    @property
    def group_name(self) -> str:
        return f"{self.name} {self.color} {self.ean}"

    @property
    def variant_sku(self) -> str:
        return f"{self.ean}-{self.color}-{self.size}"


@dataclass
class ParseError:
    """A line that raised while being parsed."""
    row: int
    error: str


@dataclass
class SkippedRow:
    """A line that was skipped during parsing (non-fatal)."""
    row: int
    reason: str


@dataclass
class StockParseResult:
    """Result of parsing a stock feed."""
    groups: list[ProductGroup] = field(default_factory=list)
    errors: list[ParseError] = field(default_factory=list)
    skipped_rows: list[SkippedRow] = field(default_factory=list)
    lines_read: int = 0

    @property
    def success(self) -> bool:
        """True if no line raised (skipped rows are not errors)."""
        return len(self.errors) == 0

    @property
    def has_data(self) -> bool:
        """True if any group was built."""
        return len(self.groups) > 0

    @property
    def variant_count(self) -> int:
        return sum(len(g.variants) for g in self.groups)


def parse_stock_file(path: Union[str, Path]) -> StockParseResult:
    """
    Parse a stock feed file from disk.

    Args:
        path: Local path of the downloaded feed

    Returns:
        StockParseResult with grouped products

    Raises:
        FeedParseError: If the file cannot be read
    """
    path = Path(path)
    logger.info("parsing_stock_file", path=str(path))

    try:
        # utf-8-sig drops a BOM; undecodable bytes become U+FFFD so one bad
        # name can't cost the rest of the file. Records end only at \r, \n, \r\n.
        with path.open("r", encoding="utf-8-sig", errors="replace") as f:
            lines = [line.rstrip("\r\n") for line in f]
    except OSError as e:
        logger.error("stock_file_read_failed", path=str(path), error=str(e))
        raise FeedParseError(
            message="Failed to read stock feed",
            details={"path": str(path), "original_error": str(e)}
        ) from e

    return parse_stock_lines(lines)


def parse_stock_lines(lines: Iterable[str]) -> StockParseResult:
    """
    Group feed lines into products.

    First row seen for a key fixes the group's name, sku and price; every
    accepted row adds a variant.
    """
    result = StockParseResult()
    grouped: dict[str, ProductGroup] = {}

    for line_number, line in enumerate(lines, start=1):
        result.lines_read += 1
        try:
            row = _parse_line(line, line_number, result)
            if row is None:
                continue
            _add_row(grouped, row)
        except Exception as e:
            result.errors.append(ParseError(row=line_number, error=str(e)))
            logger.warning("stock_line_failed", row=line_number, error=str(e))

    result.groups = list(grouped.values())

    logger.info(
        "stock_parsed",
        groups_count=len(result.groups),
        variants_count=result.variant_count,
        lines_read=result.lines_read,
        skipped_rows=len(result.skipped_rows),
        error_count=len(result.errors),
    )

    return result


def _parse_line(
    line: str,
    line_number: int,
    result: StockParseResult
) -> Optional[FeedRow]:
    """Split one line into a FeedRow, or record why it was skipped."""
    if not line.strip():
        return None

    parts = line.split(FIELD_SEPARATOR)
    if len(parts) < MIN_FIELDS:
        result.skipped_rows.append(SkippedRow(
            row=line_number,
            reason=f"Expected {MIN_FIELDS} fields, got {len(parts)}",
        ))
        return None

    inventory = _parse_inventory(parts[8])
    if inventory is None:
        result.skipped_rows.append(SkippedRow(
            row=line_number,
            reason=f"Invalid inventory: {parts[8]!r}",
        ))
        logger.debug("skipping_bad_inventory_row", row=line_number, value=parts[8])
        return None
    if inventory <= 0:
        result.skipped_rows.append(SkippedRow(
            row=line_number,
            reason="No stock",
        ))
        return None

    sku, ean, name, brand, category, gender, color, size = parts[:8]

    return FeedRow(
        line_number=line_number,
        sku=sku,
        ean=ean,
        name=name,
        brand=brand,
        category=category,
        gender=gender,
        color=color,
        size=size,
        inventory=inventory,
        price=_parse_price(parts[9]),
    )


def _add_row(grouped: dict[str, ProductGroup], row: FeedRow) -> None:
    group = grouped.get(row.group_key)
    if group is None:
        group = ProductGroup(
            name=row.group_name,
            sku=row.sku,
            price=row.price,
            mpn=row.ean,
        )
        grouped[row.group_key] = group

    group.variants.append(ProductVariant(
        sku=row.variant_sku,
        price=row.price,
        mpn=row.ean,
        inventory_level=row.inventory,
        option_values=[ProductOption(label=row.size)],
    ))


def _parse_inventory(value: str) -> Optional[int]:
    """Parse stock count, None unless an optionally signed run of ASCII digits."""
    value = value.strip()
    if not INVENTORY_PATTERN.match(value):
        return None
    return int(value)


def _parse_price(value: str) -> Decimal:
    """
    Parse price, dropping ',' thousands separators.

    Unparseable prices become 0; they never reject the row.
    """
    cleaned = value.replace(",", "").strip()
    try:
        price = Decimal(cleaned)
    except InvalidOperation:
        return Decimal("0")
    if not price.is_finite():
        return Decimal("0")
    return price
