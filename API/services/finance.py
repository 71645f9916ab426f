"""
Finance services - expenses and other (non-subscription) income.
Both are flat ledgers with a date-range total.
"""

from datetime import date
from decimal import Decimal
from typing import Generic, List, Optional, Type, TypeVar

from loguru import logger
from pydantic import BaseModel as Schema
from sqlalchemy import func

from database.models import Expense, Income
from utils.helpers import to_money
from .base import ServiceBase

EntryT = TypeVar("EntryT", Expense, Income)


class LedgerService(ServiceBase, Generic[EntryT]):
    """CRUD plus date-range sum over one ledger table."""

    model: Type[EntryT]
    label: str

    def create(self, data: Schema) -> EntryT:
        entry = self.model(
            type=data.type,
            amount=to_money(data.amount),
            date=data.date,
            description=data.description,
        )
        with self.transaction():
            self.db.add(entry)
        self.db.refresh(entry)
        logger.info(f"{self.label} recorded: id={entry.id} {entry.type.value} {entry.amount}")
        return entry

    def list(self, date_from: Optional[date] = None, date_to: Optional[date] = None) -> List[EntryT]:
        query = self._filter_range(self._q(self.model), date_from, date_to)
        return query.order_by(self.model.date.desc(), self.model.created_at.desc()).all()

    def get(self, entry_id: int) -> Optional[EntryT]:
        return self._get(self.model, entry_id)

    def update(self, entry_id: int, data: Schema) -> EntryT:
        entry = self._get_or_raise(self.model, entry_id, f"{self.label} not found")

        update_data = {
            k: v for k, v in data.model_dump(exclude_unset=True).items()
            if v is not None or k == "description"
        }
        if 'amount' in update_data:
            update_data['amount'] = to_money(update_data['amount'])

        with self.transaction():
            for key, value in update_data.items():
                setattr(entry, key, value)
        self.db.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> None:
        entry = self._get_or_raise(self.model, entry_id, f"{self.label} not found")
        with self.transaction():
            self.db.delete(entry)

    def get_total(self, date_from: Optional[date] = None, date_to: Optional[date] = None) -> Decimal:
        query = self._filter_range(self.db.query(func.sum(self.model.amount)), date_from, date_to)
        return to_money(query.scalar())

    def _filter_range(self, query, date_from: Optional[date], date_to: Optional[date]):
        if date_from:
            query = query.filter(self.model.date >= date_from)
        if date_to:
            query = query.filter(self.model.date <= date_to)
        return query


class ExpenseService(LedgerService[Expense]):
    model = Expense
    label = "Expense"


class IncomeService(LedgerService[Income]):
    model = Income
    label = "Income"
