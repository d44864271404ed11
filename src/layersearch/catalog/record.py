"""CatalogRecord dataclass - one discoverable infrastructure data layer.

Records are immutable. Field values are stored exactly as supplied by the
catalog source; search normalizes them at comparison time.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CatalogRecord:
    """A single infrastructure layer in the catalog.

    Attributes:
        name: Primary identifier and primary search field.
        agency: Data provider, secondary search field.
        service_endpoint: URL of the live map service, or None when the
            layer is reference-only and cannot be activated.
        status: Catalog status, e.g. "Active" or "Migrated".
        dua_required: Data Use Agreement gate.
        gii_required: Restricted-access gate.
    """

    name: str
    agency: str = "Unknown"
    service_endpoint: str | None = None
    status: str = "Active"
    dua_required: bool = False
    gii_required: bool = False

    @property
    def addable(self) -> bool:
        """True if the record has a renderable service endpoint."""
        return bool(self.service_endpoint)

    def to_dict(self) -> dict:
        """Serialize using the exported configuration field names."""
        return {
            "name": self.name,
            "agency": self.agency,
            "serviceUrl": self.service_endpoint,
            "status": self.status,
            "duaRequired": self.dua_required,
            "giiRequired": self.gii_required,
        }
