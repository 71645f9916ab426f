"""
Company settings - a single row holding branding and locale defaults.
"""

from sqlalchemy import Column, String, Text, Numeric, DateTime

from ..base import BaseModel, get_local_now


class CompanySettings(BaseModel):

    __tablename__ = 'company_settings'

    company_name = Column(String(200), nullable=False)
    logo_url = Column(String(500), nullable=True)
    address = Column(Text, nullable=True)
    phone = Column(String(50), nullable=True)
    email = Column(String(255), nullable=True)

    default_language = Column(String(10), default='ar', nullable=False)
    phone_country_code = Column(String(10), default='+966', nullable=False)
    currency_symbol = Column(String(10), default='SAR', nullable=False)
    tax_rate = Column(Numeric(5, 2), default=0, nullable=False)

    updated_at = Column(DateTime, default=get_local_now, onupdate=get_local_now, nullable=False)
