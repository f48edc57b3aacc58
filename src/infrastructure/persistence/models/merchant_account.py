"""Merchant account database model (subset used by role resolution)."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from src.infrastructure.persistence.base import BaseModel


class MerchantAccountModel(BaseModel):
    """Merchant account row.

    Fields:
        merchant_id: Merchant identifier, unique
        organization_id: Owning organization (indexed)
        merchant_name: Optional display name
    """

    __tablename__ = "merchant_accounts"

    merchant_id: Mapped[str] = mapped_column(String(64), nullable=False, unique=True)
    organization_id: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )
    merchant_name: Mapped[str | None] = mapped_column(String(128), nullable=True)
