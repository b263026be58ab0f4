"""
SQLAlchemy-backed account storage.
"""

import logging
from typing import Optional, List
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from timekeeper.domain.models.account import Account
from timekeeper.domain.repositories.account_repository import AccountRepository
from timekeeper.domain.models.base import EntityNotFoundError, DuplicateEntityError
from timekeeper.infrastructure.db.models import AccountModel
from timekeeper.infrastructure.mappers.account_mapper import AccountMapper


logger = logging.getLogger(__name__)


class SQLAlchemyAccountRepository(AccountRepository):
    """Accounts stored in the ``accounts`` table."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = AccountMapper()

    def save(self, account: Account) -> Account:
        self._check_unique(account)

        if account.is_new:
            model = self.mapper.domain_to_model(account)
            self.session.add(model)
        else:
            model = self.session.get(AccountModel, account.id)
            if not model:
                raise EntityNotFoundError("Account", account.id)
            self.mapper.update_model(model, account)

        try:
            self.session.commit()
        except IntegrityError:
            # Lost a race against a concurrent registration
            self.session.rollback()
            self._check_unique(account)
            raise

        self.session.refresh(model)
        return self.mapper.model_to_domain(model)

    def _check_unique(self, account: Account) -> None:
        for field, value in (("username", account.username), ("employee_id", account.employee_id)):
            existing = self.session.query(AccountModel.id).filter(
                getattr(AccountModel, field) == value
            ).first()
            if existing and existing.id != account.id:
                logger.info(f"Rejected account with duplicate {field}")
                raise DuplicateEntityError("Account", field, value)

    def get_by_id(self, account_id: int) -> Optional[Account]:
        model = self.session.get(AccountModel, account_id)

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def get_by_username(self, username: str) -> Optional[Account]:
        """Exact, case-sensitive match."""
        model = self.session.query(AccountModel).filter_by(
            username=username
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def get_by_employee_id(self, employee_id: str) -> Optional[Account]:
        model = self.session.query(AccountModel).filter_by(
            employee_id=employee_id
        ).first()

        if not model:
            return None

        return self.mapper.model_to_domain(model)

    def list_all(self) -> List[Account]:
        models = self.session.query(AccountModel).order_by(AccountModel.username).all()
        return [self.mapper.model_to_domain(model) for model in models]

    def has_admin(self) -> bool:
        return self.session.query(AccountModel.id).filter_by(is_admin=True).first() is not None
