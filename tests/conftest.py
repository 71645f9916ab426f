"""
Shared fixtures: an in-memory SQLite database per test, factories for the
common records, and a TestClient wired to the same session.
"""

from datetime import date
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app import app
from core.security import create_access_token, hash_password
from database import Base, get_db
from database.models import (
    User, UserRole, Package, BillingCycle, PackageStatus,
    Client, ServiceStatus, PaymentStatus, Invoice, InvoiceStatus
)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session(engine):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    db = Session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def make_package(session):
    def _make(
        name="Basic 20M",
        monthly_price="100.00",
        billing_cycle=BillingCycle.monthly,
        days_allowed=5,
        status=PackageStatus.active,
    ):
        package = Package(
            name=name,
            speed="20 Mbps",
            monthly_price=Decimal(monthly_price),
            billing_cycle=billing_cycle,
            days_allowed=days_allowed,
            status=status,
        )
        session.add(package)
        session.commit()
        return package
    return _make


@pytest.fixture
def make_client(session):
    """Insert a client row directly, bypassing the initial-invoice logic."""
    def _make(
        package,
        name="Ahmed",
        phone="0500000001",
        service_status=ServiceStatus.active,
        payment_status=PaymentStatus.paid,
        balance_creditor="0.00",
        start_date=date(2024, 1, 1),
    ):
        client = Client(
            name=name,
            phone=phone,
            package_id=package.id,
            start_date=start_date,
            subscription_end_date=start_date,
            service_status=service_status,
            payment_status=payment_status,
            balance_creditor=Decimal(balance_creditor),
        )
        session.add(client)
        session.commit()
        return client
    return _make


@pytest.fixture
def make_invoice(session):
    def _make(client, amount="100.00", due_date=date(2024, 1, 31),
              status=InvoiceStatus.pending):
        invoice = Invoice(
            client_id=client.id,
            amount=Decimal(amount),
            due_date=due_date,
            status=status,
        )
        session.add(invoice)
        session.commit()
        return invoice
    return _make


@pytest.fixture
def make_user(session):
    def _make(username="manager", role=UserRole.manager, permissions=None,
              password="secret123", is_active=True):
        user = User(
            username=username,
            email=f"{username}@isp.com",
            password_hash=hash_password(password),
            role=role,
            permissions=permissions or [],
            is_active=is_active,
        )
        session.add(user)
        session.commit()
        return user
    return _make


@pytest.fixture
def api(session):
    """TestClient sharing the test session. Lifespan is not run."""
    def override_get_db():
        yield session

    app.dependency_overrides[get_db] = override_get_db
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    def _headers(user):
        token = create_access_token(user)
        return {"Authorization": f"Bearer {token}"}
    return _headers


@pytest.fixture
def manager_headers(make_user, auth_headers):
    return auth_headers(make_user())
