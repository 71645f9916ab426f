from datetime import date
from decimal import Decimal

import pytest

from core.exceptions import ConflictError, NotFoundError
from database.models import (
    BillingCycle, Invoice, InvoiceStatus, Payment, PaymentMethod,
    PaymentStatus, ServiceStatus
)
from schemas.client import ClientCreate, ClientUpdate
from services.client import ClientService


def _create(session, package, **kwargs):
    data = dict(name="Sara", phone="0551234567", package_id=package.id,
                start_date=date(2024, 1, 15))
    data.update(kwargs)
    return ClientService(session).create_client(ClientCreate(**data))


@pytest.mark.parametrize("cycle,end", [
    (BillingCycle.monthly, date(2024, 2, 15)),
    (BillingCycle.quarterly, date(2024, 4, 15)),
    (BillingCycle.semi_annual, date(2024, 7, 15)),
    (BillingCycle.annual, date(2025, 1, 15)),
])
def test_subscription_end_date_follows_billing_cycle(session, make_package, cycle, end):
    package = make_package(billing_cycle=cycle)
    client = _create(session, package)
    assert client.subscription_end_date == end


def test_paid_client_gets_no_invoice(session, make_package):
    client = _create(session, make_package())
    assert session.query(Invoice).filter_by(client_id=client.id).count() == 0


def test_debted_client_gets_one_initial_invoice(session, make_package):
    package = make_package(name="Home 50", monthly_price="120.00")

    client = _create(session, package, payment_status=PaymentStatus.debted)

    invoices = session.query(Invoice).filter_by(client_id=client.id).all()
    assert len(invoices) == 1
    assert invoices[0].amount == Decimal("120.00")
    assert invoices[0].status == InvoiceStatus.pending
    assert invoices[0].due_date == client.subscription_end_date
    assert invoices[0].details == "Initial invoice for Home 50"


def test_create_client_with_missing_package(session):
    with pytest.raises(NotFoundError):
        ClientService(session).create_client(ClientCreate(
            name="X", phone="1", package_id=42
        ))


def test_list_clients_filters(session, make_package, make_client):
    p1 = make_package(name="P1")
    p2 = make_package(name="P2")
    make_client(p1, name="Ali Hassan", phone="0501111111")
    make_client(p2, name="Mona", phone="0502222222", payment_status=PaymentStatus.debted)
    make_client(p2, name="Omar", phone="0503333333", service_status=ServiceStatus.inactive)

    service = ClientService(session)
    assert [c.name for c in service.list_clients(search="ali")] == ["Ali Hassan"]
    assert [c.name for c in service.list_clients(search="2222")] == ["Mona"]
    assert [c.name for c in service.list_clients(package_id=p2.id)] == ["Mona", "Omar"]
    assert [c.name for c in service.list_clients(
        payment_status=PaymentStatus.debted)] == ["Mona"]
    assert [c.name for c in service.list_clients(
        service_status=ServiceStatus.inactive)] == ["Omar"]


def test_update_client_package_recomputes_end_date(session, make_package):
    monthly = make_package(billing_cycle=BillingCycle.monthly)
    annual = make_package(name="Annual", billing_cycle=BillingCycle.annual)
    client = _create(session, monthly)

    updated = ClientService(session).update_client(
        client.id, ClientUpdate(package_id=annual.id)
    )

    assert updated.package_id == annual.id
    assert updated.subscription_end_date == date(2025, 1, 15)


def test_update_client_to_missing_package(session, make_package):
    client = _create(session, make_package())
    with pytest.raises(NotFoundError):
        ClientService(session).update_client(client.id, ClientUpdate(package_id=999))


def test_delete_client_removes_invoices(session, make_package):
    client = _create(session, make_package(), payment_status=PaymentStatus.debted)
    client_id = client.id

    ClientService(session).delete_client(client_id)

    assert ClientService(session).get_client(client_id) is None
    assert session.query(Invoice).filter_by(client_id=client_id).count() == 0


def test_delete_client_with_payments_is_refused(session, make_package, make_client):
    client = make_client(make_package())
    session.add(Payment(client_id=client.id, amount=Decimal("10"), method=PaymentMethod.cash))
    session.commit()

    with pytest.raises(ConflictError):
        ClientService(session).delete_client(client.id)


def test_due_amount_subtracts_credit(session, make_package, make_client, make_invoice):
    client = make_client(make_package(), balance_creditor="25.00")
    make_invoice(client, amount="100.00")
    make_invoice(client, amount="50.00")
    make_invoice(client, amount="999.00", status=InvoiceStatus.paid)

    assert ClientService(session).get_client_due_amount(client.id) == Decimal("125.00")


def test_due_amount_never_negative(session, make_package, make_client, make_invoice):
    client = make_client(make_package(), balance_creditor="500.00")
    make_invoice(client, amount="100.00")

    assert ClientService(session).get_client_due_amount(client.id) == Decimal("0.00")


def test_due_amount_for_missing_client(session):
    with pytest.raises(NotFoundError):
        ClientService(session).get_client_due_amount(1)
