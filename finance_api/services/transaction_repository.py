"""
Transaction repository: every SQL statement the API issues.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Dict, List, Optional, Tuple

from sqlalchemy import delete, func, select, text
from sqlalchemy.exc import CompileError
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.orm import Session

from finance_api.models.transaction import Transaction


@dataclass
class TransactionRepository:
    session: Session

    @property
    def dialect(self) -> str:
        return self.session.get_bind().dialect.name

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

    def server_version(self) -> str:
        """Round-trip to the database and return its version string."""
        if self.dialect == "sqlite":
            query = text("SELECT sqlite_version()")
        else:
            query = text("SELECT version()")
        try:
            return str(self.session.execute(query).scalar_one())
        except Exception:
            self.session.rollback()
            raise

    def list_all(self) -> List[Transaction]:
        stmt = select(Transaction).order_by(
            Transaction.date.desc(),
            Transaction.created_at.desc(),
            Transaction.id.desc(),
        )
        return list(self.session.scalars(stmt).all())

    def count(self) -> int:
        return int(self.session.scalar(select(func.count()).select_from(Transaction)) or 0)

    def create(self, values: Dict[str, Any]) -> Transaction:
        transaction = Transaction(**values)
        self.session.add(transaction)
        self._commit()
        self.session.refresh(transaction)
        return transaction

    def insert_ignore_conflict(self, values: Dict[str, Any]) -> Optional[Transaction]:
        """
        Insert one row with ON CONFLICT DO NOTHING, committing on its own.

        Returns the inserted row, or None when the insert hit a conflict.
        Only PostgreSQL and SQLite support the conflict clause; other dialects
        raise CompileError instead of inserting without it.
        """
        if self.dialect == "postgresql":
            stmt = pg_insert(Transaction).values(**values).on_conflict_do_nothing()
        elif self.dialect == "sqlite":
            stmt = sqlite_insert(Transaction).values(**values).on_conflict_do_nothing()
        else:
            raise CompileError(f"ON CONFLICT DO NOTHING is not supported on dialect '{self.dialect}'")
        stmt = stmt.returning(Transaction)

        try:
            row = self.session.scalars(stmt).first()
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
        return row

    def delete(self, transaction_id: int) -> int:
        """Delete by id; returns the number of rows removed (0 for unknown ids)."""
        result = self.session.execute(delete(Transaction).where(Transaction.id == transaction_id))
        self._commit()
        return result.rowcount

    def total_by_type(self, txn_type: str) -> Decimal:
        stmt = select(func.coalesce(func.sum(Transaction.amount), 0)).where(Transaction.type == txn_type)
        return Decimal(str(self.session.scalar(stmt)))

    def expense_totals_by_category(self) -> List[Tuple[str, Decimal]]:
        total = func.sum(Transaction.amount).label("total")
        stmt = (
            select(Transaction.category, total)
            .where(Transaction.type == "expense")
            .group_by(Transaction.category)
            .order_by(total.desc())
        )
        return [(category, Decimal(str(amount))) for category, amount in self.session.execute(stmt).all()]
