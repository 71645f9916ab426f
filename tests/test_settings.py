from decimal import Decimal

from schemas.settings import CompanySettingsUpdate
from services.settings import SettingsService


def test_settings_absent_until_first_update(session):
    assert SettingsService(session).get_company_settings() is None


def test_first_update_creates_with_defaults(session):
    settings = SettingsService(session).update_company_settings(
        CompanySettingsUpdate(company_name="FastNet")
    )

    assert settings.company_name == "FastNet"
    assert settings.default_language == "ar"
    assert settings.phone_country_code == "+966"
    assert settings.currency_symbol == "SAR"
    assert settings.tax_rate == Decimal("0")


def test_update_keeps_single_row(session):
    service = SettingsService(session)
    first = service.update_company_settings(CompanySettingsUpdate(company_name="A"))
    second = service.update_company_settings(CompanySettingsUpdate(tax_rate=15, phone="123"))

    assert first.id == second.id
    assert second.company_name == "A"
    assert second.tax_rate == Decimal("15.00")
    assert second.phone == "123"
