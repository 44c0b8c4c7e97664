# feeds/services/types.py

"""
Value objects passed between parser → matcher → importer → scheduler.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any, Optional


@dataclass
class FeedItem:
    """One normalized product candidate parsed from a feed."""

    name: str
    description: str = ""
    price: Decimal = Decimal("0.00")
    image: Optional[str] = None
    vendor: Optional[str] = None
    in_stock: bool = True
    compare_at_price: Optional[Decimal] = None
    feed_category: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["price"] = str(self.price)
        data["compare_at_price"] = (
            str(self.compare_at_price) if self.compare_at_price is not None else None
        )
        return data


@dataclass(frozen=True)
class StoreCategory:
    """The slice of a catalog Category the matcher needs."""

    id: int
    name: str
    slug: str


@dataclass
class ImportResult:
    imported: int = 0
    skipped: int = 0
    products: list[dict[str, Any]] = field(default_factory=list)
    skipped_names: list[str] = field(default_factory=list)
    categories_matched: int = 0

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass
class SourceRunOutcome:
    """What happened to one FeedSource on one scheduler tick / manual run."""

    STATUS_IMPORTED = "imported"
    STATUS_FAILED = "failed"
    STATUS_NOT_DUE = "not_due"

    source_id: int
    name: str
    status: str
    imported: int = 0
    skipped: int = 0
    categories_matched: int = 0
    error: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
