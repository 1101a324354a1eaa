from collections.abc import Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from domainkit.domain.common import DomainEvent, DomainEventNotification
from domainkit.integration.events import EventMapper, IntegrationEvent


class Clock:
    def now(self) -> datetime:
        return datetime.now(UTC)


@dataclass(frozen=True)
class InvoiceIssued(DomainEvent):
    invoice_id: str


class InvoiceIssuedNotification(DomainEventNotification[InvoiceIssued]):
    pass


@dataclass(frozen=True)
class InvoiceSent(IntegrationEvent):
    invoice_id: str
    sent_at: datetime


class InvoiceIssuedEventMapper(EventMapper[InvoiceIssuedNotification]):
    def __init__(self, clock: Clock) -> None:
        self.clock = clock

    async def create_events(
        self, notification: InvoiceIssuedNotification
    ) -> Sequence[IntegrationEvent]:
        return [InvoiceSent(notification.domain_event.invoice_id, self.clock.now())]
