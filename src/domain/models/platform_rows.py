"""Domain models for platform row data."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from src.domain.constants import TRANSACTION_TYPE_DEBIT


@dataclass(frozen=True)
class CollectiveRow:
    """Row representing a collective, user profile, organization or host."""

    id: int
    slug: str
    name: str | None = None
    currency: str | None = None
    settings: Mapping[str, Any] = field(default_factory=dict)

    @property
    def invoice_title(self) -> str | None:
        """Return the custom invoice title from the collective settings."""
        title = self.settings.get("invoiceTitle")
        return title or None


@dataclass(frozen=True)
class TransactionRow:
    """Row representing a ledger transaction.

    Amounts are integers in minor currency units (cents).
    """

    id: int
    uuid: str
    created_at: datetime
    type: str
    amount: int
    amount_in_host_currency: int
    host_currency: str | None
    net_amount_in_collective_currency: int
    host_collective_id: int | None
    from_collective_id: int | None
    collective_id: int | None
    using_virtual_card_from_collective_id: int | None = None
    description: str | None = None

    def payment_method_provider_collective_id(self) -> int | None:
        """Return the collective billed for this transaction.

        Virtual card payments are billed to the card issuer. Otherwise the
        debited side is the owning collective and the credited side is the
        contributor.
        """
        if self.using_virtual_card_from_collective_id:
            return self.using_virtual_card_from_collective_id
        if self.type == TRANSACTION_TYPE_DEBIT:
            return self.collective_id
        return self.from_collective_id


__all__ = ["CollectiveRow", "TransactionRow"]
