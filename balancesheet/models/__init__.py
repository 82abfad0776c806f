from balancesheet.models.user import User
from balancesheet.models.income import Income
from balancesheet.models.expense import Expense
from balancesheet.models.asset import Asset
from balancesheet.models.liability import Liability
from balancesheet.models.goal import Goal

__all__ = ["User", "Income", "Expense", "Asset", "Liability", "Goal"]
