from balancesheet.models.asset import Asset
from balancesheet.models.expense import Expense
from balancesheet.models.goal import Goal
from balancesheet.models.income import Income
from balancesheet.models.liability import Liability
from balancesheet.repositories.base import OwnedRecordRepository
from balancesheet.schemas.asset import AssetRead
from balancesheet.schemas.expense import ExpenseRead
from balancesheet.schemas.goal import GoalRead
from balancesheet.schemas.income import IncomeRead
from balancesheet.schemas.liability import LiabilityRead


class IncomeRepository(OwnedRecordRepository[Income, IncomeRead]):
    model = Income
    read_schema = IncomeRead
    decimal_fields = ("amount",)
    label = "income"


class ExpenseRepository(OwnedRecordRepository[Expense, ExpenseRead]):
    model = Expense
    read_schema = ExpenseRead
    decimal_fields = ("amount",)
    label = "expense"


class AssetRepository(OwnedRecordRepository[Asset, AssetRead]):
    model = Asset
    read_schema = AssetRead
    decimal_fields = ("value", "income_generated")
    label = "asset"


class LiabilityRepository(OwnedRecordRepository[Liability, LiabilityRead]):
    model = Liability
    read_schema = LiabilityRead
    decimal_fields = ("amount", "interest_rate")
    label = "liability"


class GoalRepository(OwnedRecordRepository[Goal, GoalRead]):
    model = Goal
    read_schema = GoalRead
    decimal_fields = ("target_amount", "current_amount")
    label = "goal"
