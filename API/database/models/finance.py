"""
Finance models - operating expenses and non-subscription income.
Neither references any other table.
"""

from enum import Enum as PyEnum
from sqlalchemy import Column, Text, Numeric, Date, Enum

from ..base import BaseModel, CreatedAtMixin


class ExpenseType(str, PyEnum):
    lines = "lines"
    electricity = "electricity"
    maintenance = "maintenance"
    equipment = "equipment"
    other = "other"


class IncomeType(str, PyEnum):
    connecting_service = "connecting_service"
    sale_equipment = "sale_equipment"
    other = "other"


class Expense(BaseModel, CreatedAtMixin):

    __tablename__ = 'expenses'

    type = Column(Enum(ExpenseType), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)


class Income(BaseModel, CreatedAtMixin):

    __tablename__ = 'incomes'

    type = Column(Enum(IncomeType), nullable=False)
    amount = Column(Numeric(10, 2), nullable=False)
    date = Column(Date, nullable=False, index=True)
    description = Column(Text, nullable=True)
