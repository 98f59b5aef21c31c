"""
Fixed output schemas, one per recognized document kind.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from ..models import DocumentKind


@dataclass(frozen=True)
class ColumnSpec:
    """An output column and the field it is read from."""
    column: str
    section: str
    field: str


@dataclass(frozen=True)
class DocumentSchema:
    """Ordered output columns for one document kind."""
    kind: DocumentKind
    columns: Tuple[ColumnSpec, ...]

    @property
    def header(self) -> List[str]:
        return [spec.column for spec in self.columns]


def _columns(*triples: Tuple[str, str, str]) -> Tuple[ColumnSpec, ...]:
    return tuple(ColumnSpec(*triple) for triple in triples)


RSU_SCHEMA = DocumentSchema(
    kind=DocumentKind.RSU,
    columns=_columns(
        ("Award Date", "Release Summary", "Award Date"),
        ("Release Date", "Release Summary", "Release Date"),
        ("Shares Released", "Release Summary", "Shares Released"),
        ("Market Value Per Share", "Release Summary", "Market Value Per Share"),
        ("Sale Price Per Share", "Release Summary", "Sale Price Per Share"),
        ("Market Value", "Calculation of Gain", "Market Value"),
        ("Shares Sold", "Stock Distribution", "Shares Sold"),
        ("Shares Issued", "Stock Distribution", "Shares Issued"),
        ("Total Sale Price", "Cash Distribution", "Total Sale Price"),
        ("Total Tax", "Cash Distribution", "Total Tax"),
        ("Fee", "Cash Distribution", "Fee"),
        ("Total Due Participant", "Cash Distribution", "Total Due Participant"),
    ),
)

ESPP_SCHEMA = DocumentSchema(
    kind=DocumentKind.ESPP,
    columns=_columns(
        ("Grant Date", "Purchase Summary", "Grant Date"),
        ("Purchase Begin Date", "Purchase Summary", "Purchase Begin Date"),
        ("Purchase Date", "Purchase Summary", "Purchase Date"),
        ("Shares Purchased", "Shares Purchased to Date in Current Offering", "Shares Purchased"),
        ("Previous Carry Forward", "Contributions", "Previous Carry Forward"),
        ("Current Contributions", "Contributions", "Current Contributions"),
        ("Total Contributions", "Contributions", "Total Contributions"),
        ("Total Price", "Contributions", "Total Price"),
        ("Amount Refunded", "Contributions", "Amount Refunded"),
        ("Grant Date Market Value", "Calculation of Shares Purchased", "Grant Date Market Value"),
        ("Purchase Value per Share", "Calculation of Shares Purchased", "Purchase Value per Share"),
        ("Purchase Price per Share", "Calculation of Shares Purchased", "Purchase Price per Share"),
        ("Total Value", "Calculation of Gain", "Total Value"),
        ("Taxable Gain", "Calculation of Gain", "Taxable Gain"),
    ),
)

# Declaration order is the order tables are written in
SCHEMAS: Dict[DocumentKind, DocumentSchema] = {
    RSU_SCHEMA.kind: RSU_SCHEMA,
    ESPP_SCHEMA.kind: ESPP_SCHEMA,
}
