from datetime import date
from decimal import Decimal

import pytest

from core.exceptions import ConflictError, NotFoundError
from database.models import InvoiceStatus, Payment, PaymentMethod, PaymentStatus
from schemas.billing import PaymentCreate
from services.payment import BATCH_PAYMENT_NOTE, PaymentService


def _payment(client, amount, invoice=None, notes=None):
    return PaymentCreate(
        client_id=client.id,
        invoice_id=invoice.id if invoice else None,
        amount=amount,
        method=PaymentMethod.cash,
        notes=notes,
    )


def test_full_payment_settles_invoice_and_client(session, make_package, make_client, make_invoice):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    invoice = make_invoice(client, amount="100.00")

    payment = PaymentService(session).create_payment(_payment(client, 100, invoice))

    assert payment.invoice_id == invoice.id
    session.refresh(invoice)
    session.refresh(client)
    assert invoice.status == InvoiceStatus.paid
    assert client.payment_status == PaymentStatus.paid


def test_partial_payment_leaves_invoice_pending(session, make_package, make_client, make_invoice):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    invoice = make_invoice(client, amount="100.00")

    PaymentService(session).create_payment(_payment(client, 40, invoice))

    session.refresh(invoice)
    session.refresh(client)
    assert invoice.status == InvoiceStatus.pending
    assert client.payment_status == PaymentStatus.debted


def test_payment_for_another_clients_invoice(session, make_package, make_client, make_invoice):
    package = make_package()
    owner = make_client(package, name="Owner")
    other = make_client(package, name="Other", phone="2")
    invoice = make_invoice(owner)

    with pytest.raises(NotFoundError):
        PaymentService(session).create_payment(_payment(other, 100, invoice))

    assert session.query(Payment).count() == 0


def test_payment_for_missing_client(session):
    with pytest.raises(NotFoundError):
        PaymentService(session).create_payment(PaymentCreate(
            client_id=3, amount=10, method=PaymentMethod.cash
        ))


def test_batch_payment_settles_oldest_first(session, make_package, make_client, make_invoice):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    newest = make_invoice(client, amount="100.00", due_date=date(2024, 3, 31))
    oldest = make_invoice(client, amount="100.00", due_date=date(2024, 1, 31))
    middle = make_invoice(client, amount="100.00", due_date=date(2024, 2, 29))

    payment, settled, remaining = PaymentService(session).create_batch_payment(
        _payment(client, 250)
    )

    assert [i.id for i in settled] == [oldest.id, middle.id]
    assert remaining == Decimal("50.00")
    assert payment.invoice_id is None
    assert payment.notes == BATCH_PAYMENT_NOTE
    assert payment.amount == Decimal("250.00")
    session.refresh(newest)
    assert newest.status == InvoiceStatus.pending
    session.refresh(client)
    assert client.payment_status == PaymentStatus.debted


def test_batch_payment_stops_at_first_uncovered_invoice(
    session, make_package, make_client, make_invoice
):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    big = make_invoice(client, amount="300.00", due_date=date(2024, 1, 31))
    small = make_invoice(client, amount="50.00", due_date=date(2024, 2, 29))

    _, settled, remaining = PaymentService(session).create_batch_payment(_payment(client, 100))

    assert settled == []
    assert remaining == Decimal("100.00")
    session.refresh(big)
    session.refresh(small)
    assert big.status == InvoiceStatus.pending
    assert small.status == InvoiceStatus.pending


def test_batch_payment_clearing_all_invoices_settles_client(
    session, make_package, make_client, make_invoice
):
    client = make_client(make_package(), payment_status=PaymentStatus.debted)
    make_invoice(client, amount="60.00", due_date=date(2024, 1, 31))
    make_invoice(client, amount="40.00", due_date=date(2024, 2, 29))

    _, settled, remaining = PaymentService(session).create_batch_payment(
        _payment(client, 100, notes="Counter payment")
    )

    assert len(settled) == 2
    assert remaining == Decimal("0.00")
    session.refresh(client)
    assert client.payment_status == PaymentStatus.paid


def test_batch_payment_without_pending_invoices(session, make_package, make_client, make_invoice):
    client = make_client(make_package())
    make_invoice(client, status=InvoiceStatus.paid)

    with pytest.raises(ConflictError):
        PaymentService(session).create_batch_payment(_payment(client, 100))

    assert session.query(Payment).count() == 0


def test_list_payments_by_client(session, make_package, make_client):
    package = make_package()
    a = make_client(package, name="A")
    b = make_client(package, name="B", phone="2")
    service = PaymentService(session)
    service.create_payment(_payment(a, 10))
    service.create_payment(_payment(b, 20))

    assert [p.amount for p in service.list_payments(client_id=a.id)] == [Decimal("10.00")]
    assert len(service.list_payments()) == 2
