"""Multi-step mutations commit as one unit or not at all."""

from datetime import date

import pytest

import services.payment
from database.models import (
    Client, Invoice, InvoiceStatus, Payment, PaymentMethod, PaymentStatus
)
from schemas.billing import PaymentCreate
from schemas.client import ClientCreate
from services.client import ClientService
from services.payment import PaymentService


def test_failed_initial_invoice_discards_new_client(session, make_package, monkeypatch):
    package = make_package()
    original_add = session.add

    def add_failing_on_invoice(instance, *args, **kwargs):
        if isinstance(instance, Invoice):
            raise RuntimeError("invoice insert failed")
        return original_add(instance, *args, **kwargs)

    monkeypatch.setattr(session, "add", add_failing_on_invoice)

    with pytest.raises(RuntimeError):
        ClientService(session).create_client(ClientCreate(
            name="Nour", phone="0500000009", package_id=package.id,
            payment_status=PaymentStatus.debted,
        ))

    monkeypatch.undo()
    assert session.query(Client).count() == 0
    assert session.query(Invoice).count() == 0


def test_failed_batch_payment_leaves_invoices_pending(
    session, make_package, make_client, make_invoice, monkeypatch
):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    first = make_invoice(client, amount="50.00", due_date=date(2024, 1, 31))
    second = make_invoice(client, amount="50.00", due_date=date(2024, 2, 29))

    def fail(db, client):
        raise RuntimeError("status refresh failed")

    monkeypatch.setattr(services.payment, "refresh_client_payment_status", fail)

    with pytest.raises(RuntimeError):
        PaymentService(session).create_batch_payment(PaymentCreate(
            client_id=client.id, amount=100, method=PaymentMethod.cash
        ))

    assert session.query(Payment).count() == 0
    session.refresh(first)
    session.refresh(second)
    session.refresh(client)
    assert first.status == InvoiceStatus.pending
    assert second.status == InvoiceStatus.pending
    assert client.payment_status == PaymentStatus.debted


def test_failed_single_payment_leaves_invoice_pending(
    session, make_package, make_client, make_invoice, monkeypatch
):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    invoice = make_invoice(client, amount="80.00")

    def fail(db, client):
        raise RuntimeError("status refresh failed")

    monkeypatch.setattr(services.payment, "refresh_client_payment_status", fail)

    with pytest.raises(RuntimeError):
        PaymentService(session).create_payment(PaymentCreate(
            client_id=client.id, invoice_id=invoice.id, amount=80, method=PaymentMethod.cash
        ))

    assert session.query(Payment).count() == 0
    session.refresh(invoice)
    assert invoice.status == InvoiceStatus.pending
