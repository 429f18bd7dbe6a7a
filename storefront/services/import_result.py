"""
Import Result - outcome of one successful import run, for CLI display.
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class ImportResult:
    """
    Counts reported by an importer after its write succeeded.

    Attributes:
        entity_type: Plural entity name ("categories", "products", ...)
        documents: Root documents written
        children: Nested documents written (L2 categories, variants, lines)
        skipped_rows: Row numbers excluded as not ready for the catalog
    """

    entity_type: str
    documents: int = 0
    children: int = 0
    skipped_rows: List[int] = field(default_factory=list)

    def get_summary(self) -> str:
        """Generate user-friendly summary for CLI display."""
        lines = [
            "=" * 60,
            f"Import Summary ({self.entity_type})",
            "=" * 60,
            f"  Documents written: {self.documents}",
        ]
        if self.children:
            lines.append(f"  Nested documents:  {self.children}")
        if self.skipped_rows:
            lines.append(f"  Rows skipped:      {len(self.skipped_rows)}")
            shown = ", ".join(str(row) for row in self.skipped_rows[:10])
            if len(self.skipped_rows) > 10:
                shown = f"{shown}, ... and {len(self.skipped_rows) - 10} more"
            lines.append(f"    rows: {shown}")
        lines.append("=" * 60)
        return "\n".join(lines)
