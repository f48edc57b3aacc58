"""Merchant account entity (read-only view used for merchant resolution)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MerchantAccount:
    """Merchant account belonging to an organization.

    Attributes:
        merchant_id: Merchant identifier.
        organization_id: Owning organization.
        merchant_name: Optional display name.
    """

    merchant_id: str
    organization_id: str
    merchant_name: str | None = None

    def get_id(self) -> str:
        """Return the merchant identifier."""
        return self.merchant_id
