"""
Result types collected during a sync run.

Each product group ends with exactly one GroupResult; the run gathers them
into a SyncSummary.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

from models.product import ProductDetail


class SyncOutcome(str, Enum):
    """Terminal state of one unit of work."""
    CREATED = "created"
    UPDATED = "updated"
    SKIPPED = "skipped"
    FAILED = "failed"


class LookupStatus(str, Enum):
    FOUND = "found"
    NOT_FOUND = "not_found"
    ERROR = "error"


@dataclass
class ProductLookup:
    """Outcome of a catalog search by name."""
    status: LookupStatus
    detail: Optional[ProductDetail] = None
    error: Optional[str] = None

    @property
    def found(self) -> bool:
        return self.status == LookupStatus.FOUND


@dataclass
class CreateResult:
    """Outcome of a product create request."""
    success: bool
    product_id: Optional[int] = None
    sku: Optional[str] = None
    error: Optional[str] = None


@dataclass
class VariantUpdateResult:
    """Outcome for a single remote variant."""
    sku: str
    outcome: SyncOutcome
    variant_id: Optional[int] = None
    reason: Optional[str] = None


@dataclass
class ReconcileResult:
    """Outcome of reconciling one remote product's variants."""
    product_id: int
    variants: list[VariantUpdateResult] = field(default_factory=list)
    missing_remotely: list[str] = field(default_factory=list)
    error: Optional[str] = None

    def _with_outcome(self, outcome: SyncOutcome) -> list[VariantUpdateResult]:
        return [v for v in self.variants if v.outcome == outcome]

    @property
    def updated(self) -> list[VariantUpdateResult]:
        return self._with_outcome(SyncOutcome.UPDATED)

    @property
    def created(self) -> list[VariantUpdateResult]:
        return self._with_outcome(SyncOutcome.CREATED)

    @property
    def not_in_feed(self) -> list[VariantUpdateResult]:
        return self._with_outcome(SyncOutcome.SKIPPED)

    @property
    def failed(self) -> list[VariantUpdateResult]:
        return self._with_outcome(SyncOutcome.FAILED)

    @property
    def success(self) -> bool:
        """False only when the variant list itself couldn't be fetched."""
        return self.error is None


@dataclass
class GroupResult:
    """Terminal outcome for one product group."""
    name: str
    outcome: SyncOutcome
    reason: Optional[str] = None
    product_id: Optional[int] = None


@dataclass
class SyncSummary:
    """Everything a run did, for the final log line."""
    started_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    finished_at: Optional[datetime] = None
    groups_parsed: int = 0
    results: list[GroupResult] = field(default_factory=list)
    fatal_error: Optional[str] = None

    @property
    def aborted(self) -> bool:
        """True if the run stopped before processing groups."""
        return self.fatal_error is not None

    def count(self, outcome: SyncOutcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    def to_dict(self) -> dict:
        """Flat counts for logging."""
        return {
            "groups_parsed": self.groups_parsed,
            "processed": len(self.results),
            "created": self.count(SyncOutcome.CREATED),
            "updated": self.count(SyncOutcome.UPDATED),
            "skipped": self.count(SyncOutcome.SKIPPED),
            "failed": self.count(SyncOutcome.FAILED),
            "aborted": self.aborted,
            "fatal_error": self.fatal_error,
        }
