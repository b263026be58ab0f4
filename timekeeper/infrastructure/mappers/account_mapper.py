"""
Account mapper for converting between domain entities and database models.
"""

from timekeeper.domain.models.account import Account, Position
from timekeeper.infrastructure.db.models import AccountModel


class AccountMapper:
    """Maps between Account domain entity and AccountModel database model."""

    def domain_to_model(self, account: Account) -> AccountModel:
        """Convert Account domain entity to AccountModel."""
        model = AccountModel(id=account.id)
        self.update_model(model, account)
        return model

    def update_model(self, model: AccountModel, account: Account) -> None:
        """Copy mutable account state onto an existing row."""
        model.username = account.username
        model.password_hash = account.password_hash
        model.position = account.position.value
        model.employee_id = account.employee_id
        model.is_admin = account.is_admin
        model.created_at = account.created_at
        model.updated_at = account.updated_at

    def model_to_domain(self, model: AccountModel) -> Account:
        """Convert AccountModel to Account domain entity."""
        return Account(
            id=model.id,
            username=model.username,
            password_hash=model.password_hash,
            position=Position(model.position),
            employee_id=model.employee_id,
            is_admin=bool(model.is_admin),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
