"""Sample data for a fresh install, inserted only into an empty store."""

import logging
from datetime import date

from host_manager.application.interfaces import (
    ClientRepository,
    PlatformRepository,
    RecordRepository,
)
from host_manager.domain.entities import (
    Client,
    PaymentStatus,
    Platform,
    Record,
    RenewalStatus,
)

logger = logging.getLogger(__name__)


def demo_platforms() -> list[Platform]:
    return [
        Platform(id="platform1", name="Hostcode"),
        Platform(id="platform2", name="Serverlize"),
    ]


def demo_clients() -> list[Client]:
    return [
        Client(id="client1", name="Client One", ip_address="192.168.1.1", platform="platform1"),
        Client(id="client2", name="Client Two", ip_address="192.168.1.2", platform="platform2"),
    ]


def demo_records() -> list[Record]:
    return [
        Record(
            id="1",
            client_id="client1",
            date=date(2023, 10, 15),
            renewal_status=RenewalStatus.RENEWED,
            vendor_invoice_number="INV-2023-001",
            received_cost=8400,
            vendor_cost=5600,
            total_profit=2800,
            payment_status=PaymentStatus.PAID,
        ),
        Record(
            id="2",
            client_id="client2",
            date=date(2023, 10, 18),
            renewal_status=RenewalStatus.CANCELED,
            vendor_invoice_number="INV-2023-002",
            received_cost=10500,
            vendor_cost=7000,
            total_profit=3500,
            payment_status=PaymentStatus.PENDING,
        ),
    ]


async def seed_demo_data(
    platforms: PlatformRepository,
    clients: ClientRepository,
    records: RecordRepository,
) -> bool:
    """Insert the sample platforms, clients and records if all three are empty.

    Idempotent — returns False without writing when any data exists.
    """
    if (
        await platforms.list_all()
        or await clients.list_all()
        or await records.list_all()
    ):
        logger.debug("Store already has data; skipping demo seed")
        return False

    for platform in demo_platforms():
        await platforms.create(platform)
    for client in demo_clients():
        await clients.create(client)
    for record in demo_records():
        await records.create(record)
    logger.info("Seeded demo platforms, clients and records")
    return True
