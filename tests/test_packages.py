import pytest

from core.exceptions import ConflictError, NotFoundError
from database.models import BillingCycle, PackageStatus
from schemas.package import PackageCreate, PackageUpdate
from services.package import PackageService


def test_create_package_is_active(session):
    package = PackageService(session).create_package(PackageCreate(
        name="Fiber 100",
        speed="100 Mbps",
        monthly_price=250,
        billing_cycle=BillingCycle.quarterly,
        days_allowed=7,
    ))

    assert package.id is not None
    assert package.status == PackageStatus.active
    assert float(package.monthly_price) == 250.0


def test_list_active_packages_excludes_inactive(session, make_package):
    make_package(name="A")
    make_package(name="B", status=PackageStatus.inactive)

    service = PackageService(session)
    assert [p.name for p in service.list_packages()] == ["A", "B"]
    assert [p.name for p in service.list_active_packages()] == ["A"]


def test_update_package_partial(session, make_package):
    package = make_package(name="Old")

    updated = PackageService(session).update_package(
        package.id, PackageUpdate(name="New", status=PackageStatus.inactive)
    )

    assert updated.name == "New"
    assert updated.status == PackageStatus.inactive
    assert updated.speed == "20 Mbps"


def test_update_missing_package(session):
    with pytest.raises(NotFoundError):
        PackageService(session).update_package(999, PackageUpdate(name="X"))


def test_delete_package_in_use_is_refused(session, make_package, make_client):
    package = make_package()
    make_client(package)

    with pytest.raises(ConflictError):
        PackageService(session).delete_package(package.id)

    assert PackageService(session).get_package(package.id) is not None


def test_delete_unused_package(session, make_package):
    package = make_package()
    service = PackageService(session)

    service.delete_package(package.id)

    assert service.get_package(package.id) is None
    with pytest.raises(NotFoundError):
        service.delete_package(package.id)
