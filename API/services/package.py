"""
Package service - the catalog of service tiers.
"""

from decimal import Decimal
from typing import List, Optional

from loguru import logger
from sqlalchemy import func

from core.exceptions import ConflictError
from database.models import Package, PackageStatus, Client
from schemas.package import PackageCreate, PackageUpdate
from .base import ServiceBase


NULLABLE_FIELDS = {"description"}


class PackageService(ServiceBase):
    """Package catalog CRUD."""

    def create_package(self, data: PackageCreate) -> Package:
        package = Package(
            name=data.name,
            speed=data.speed,
            monthly_price=Decimal(str(data.monthly_price)),
            billing_cycle=data.billing_cycle,
            days_allowed=data.days_allowed,
            description=data.description,
            status=PackageStatus.active,
        )
        with self.transaction():
            self.db.add(package)
        self.db.refresh(package)
        logger.info(f"Package created: {package.name} (id={package.id})")
        return package

    def list_packages(self) -> List[Package]:
        return self._q(Package).order_by(Package.id).all()

    def list_active_packages(self) -> List[Package]:
        return self._q(Package).filter(
            Package.status == PackageStatus.active
        ).order_by(Package.id).all()

    def get_package(self, package_id: int) -> Optional[Package]:
        return self._get(Package, package_id)

    def update_package(self, package_id: int, data: PackageUpdate) -> Package:
        package = self._get_or_raise(Package, package_id, "Package not found")

        update_data = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k in NULLABLE_FIELDS
        }
        if update_data.get('monthly_price') is not None:
            update_data['monthly_price'] = Decimal(str(update_data['monthly_price']))

        with self.transaction():
            for key, value in update_data.items():
                setattr(package, key, value)
        self.db.refresh(package)
        return package

    def delete_package(self, package_id: int) -> None:
        """Delete a package. Refused while any client is subscribed to it."""
        package = self._get_or_raise(Package, package_id, "Package not found")

        clients_count = self.db.query(func.count(Client.id)).filter(
            Client.package_id == package_id
        ).scalar() or 0
        if clients_count > 0:
            raise ConflictError(
                f"Cannot delete package used by {clients_count} client(s)"
            )

        with self.transaction():
            self.db.delete(package)
        logger.info(f"Package deleted: id={package_id}")
