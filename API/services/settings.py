"""
Company settings service - singleton row, created on first update.
"""

from decimal import Decimal
from typing import Optional

from database.models import CompanySettings
from schemas.settings import CompanySettingsUpdate
from .base import ServiceBase


DEFAULTS = {
    "company_name": "Default Company",
    "default_language": "ar",
    "phone_country_code": "+966",
    "currency_symbol": "SAR",
    "tax_rate": Decimal("0"),
}

NULLABLE_FIELDS = {"logo_url", "address", "phone", "email"}


class SettingsService(ServiceBase):

    def get_company_settings(self) -> Optional[CompanySettings]:
        return self._q(CompanySettings).order_by(CompanySettings.id).first()

    def update_company_settings(self, data: CompanySettingsUpdate) -> CompanySettings:
        update_data = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k in NULLABLE_FIELDS
        }
        if 'tax_rate' in update_data:
            update_data['tax_rate'] = Decimal(str(update_data['tax_rate']))

        with self.transaction():
            settings = self.get_company_settings()
            if settings is None:
                settings = CompanySettings(**{**DEFAULTS, **update_data})
                self.db.add(settings)
            else:
                for key, value in update_data.items():
                    setattr(settings, key, value)

        self.db.refresh(settings)
        return settings
