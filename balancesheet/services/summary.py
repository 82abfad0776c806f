from collections import defaultdict
from dataclasses import dataclass, field
from typing import List

from sqlmodel import Session

from balancesheet.models.enums import IncomeType
from balancesheet.repositories.records import (
    AssetRepository,
    ExpenseRepository,
    GoalRepository,
    IncomeRepository,
    LiabilityRepository,
)
from balancesheet.schemas.asset import AssetRead
from balancesheet.schemas.expense import ExpenseRead
from balancesheet.schemas.goal import GoalRead
from balancesheet.schemas.income import IncomeRead
from balancesheet.schemas.liability import LiabilityRead


@dataclass(frozen=True)
class FinancialSummary:
    total_income: float = 0.0
    total_expenses: float = 0.0
    cash_flow: float = 0.0
    per_day: float = 0.0
    passive_income: float = 0.0
    net_worth: float = 0.0
    largest_expense_category: str = ""
    largest_expense_amount: float = 0.0


@dataclass(frozen=True)
class FinancialData:
    incomes: List[IncomeRead] = field(default_factory=list)
    expenses: List[ExpenseRead] = field(default_factory=list)
    assets: List[AssetRead] = field(default_factory=list)
    liabilities: List[LiabilityRead] = field(default_factory=list)
    goals: List[GoalRead] = field(default_factory=list)
    summary: FinancialSummary = field(default_factory=FinancialSummary)


def build_financial_summary(
    incomes: List[IncomeRead],
    expenses: List[ExpenseRead],
    assets: List[AssetRead],
    liabilities: List[LiabilityRead],
) -> FinancialSummary:
    total_income = sum(i.amount for i in incomes)
    total_expenses = sum(e.amount for e in expenses)
    cash_flow = total_income - total_expenses
    passive_income = sum(i.amount for i in incomes if i.type == IncomeType.passive)
    net_worth = sum(a.value for a in assets) - sum(l.amount for l in liabilities)

    by_category = defaultdict(float)
    for expense in expenses:
        by_category[expense.category] += expense.amount

    largest_category, largest_amount = "", 0.0
    if by_category:
        largest_category, largest_amount = max(by_category.items(), key=lambda item: item[1])

    return FinancialSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        cash_flow=cash_flow,
        per_day=cash_flow / 30,
        passive_income=passive_income,
        net_worth=net_worth,
        largest_expense_category=largest_category,
        largest_expense_amount=largest_amount,
    )


def load_financial_data(session: Session, user_id: int) -> FinancialData:
    incomes = IncomeRepository(session).list(user_id)
    expenses = ExpenseRepository(session).list(user_id)
    assets = AssetRepository(session).list(user_id)
    liabilities = LiabilityRepository(session).list(user_id)
    goals = GoalRepository(session).list(user_id)

    return FinancialData(
        incomes=incomes,
        expenses=expenses,
        assets=assets,
        liabilities=liabilities,
        goals=goals,
        summary=build_financial_summary(incomes, expenses, assets, liabilities),
    )


def format_amount(value: float) -> str:
    # 5000.0 -> "5000", 12.5 -> "12.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def build_financial_context(data: FinancialData) -> str:
    """Bloque de texto con los datos del usuario que va dentro del prompt del LLM."""
    lines: List[str] = []

    if data.incomes:
        lines.append("INCOMES:")
        for income in data.incomes:
            lines.append(f"- {income.source}: ${format_amount(income.amount)} ({income.frequency.value})")

    if data.expenses:
        lines.append("\nEXPENSES:")
        for expense in data.expenses:
            lines.append(f"- {expense.category}: ${format_amount(expense.amount)}")

    if data.assets:
        lines.append("\nASSETS:")
        for asset in data.assets:
            lines.append(f"- {asset.name}: ${format_amount(asset.value)}")

    if data.liabilities:
        lines.append("\nLIABILITIES:")
        for liability in data.liabilities:
            lines.append(f"- {liability.description}: ${format_amount(liability.amount)}")

    if data.goals:
        lines.append("\nGOALS:")
        for goal in data.goals:
            lines.append(
                f"- {goal.description}: ${format_amount(goal.current_amount)} / ${format_amount(goal.target_amount)}"
            )

    return "\n".join(lines)
