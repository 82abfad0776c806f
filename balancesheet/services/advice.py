"""
Generador de consejos financieros basado en reglas.

Función pura de (consulta, datos del usuario): las reglas se evalúan en orden
sobre la consulta en minúsculas y la primera que coincide elige la plantilla.
Si ninguna coincide se devuelve el resumen general.
"""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Callable, List, Optional, Tuple

from balancesheet.models.enums import IncomeType
from balancesheet.services.summary import FinancialData
from balancesheet.utils.dates import months_between

HIGH_INTEREST_RATE = 5  # porcentaje

AdviceTemplate = Callable[[FinancialData, date], str]
AdviceRule = Tuple[Callable[[str], bool], AdviceTemplate]


def fixed(value: float, digits: int) -> str:
    # Empates hacia arriba sobre el valor exacto del float: 12.5 -> "13", 12.25 -> "12.3"
    return str(Decimal(value).quantize(Decimal(1).scaleb(-digits), rounding=ROUND_HALF_UP))


def _wants_expense_reduction(q: str) -> bool:
    return "reduce" in q and ("expense" in q or "spending" in q)


def _wants_asset_growth(q: str) -> bool:
    return "increase" in q and "asset" in q


def _wants_debt_reduction(q: str) -> bool:
    return ("reduce" in q or "pay off" in q) and "liability" in q


def _wants_goal_help(q: str) -> bool:
    return "goal" in q or "reach" in q


def expense_reduction_advice(data: FinancialData, today: date) -> str:
    summary = data.summary
    category = summary.largest_expense_category
    share = (summary.largest_expense_amount / summary.total_expenses) * 100 if summary.total_expenses else 0.0

    advice = "Based on your expense data, here are some recommendations to reduce your spending:\n\n"
    advice += f"1. Your largest expense category is {category} ({fixed(share, 1)}% of total expenses). "
    advice += "Consider if there are ways to reduce this expense, such as:\n"

    if category == "Housing":
        advice += "   - Downsizing to a smaller home or apartment\n"
        advice += "   - Refinancing your mortgage for a lower rate\n"
        advice += "   - Taking on a roommate to share costs\n"
    elif category == "Transportation":
        advice += "   - Using public transportation more often\n"
        advice += "   - Carpooling or ride-sharing\n"
        advice += "   - Maintaining your vehicle properly to avoid costly repairs\n"
    elif category == "Food":
        advice += "   - Meal planning to reduce grocery waste\n"
        advice += "   - Cooking at home instead of eating out\n"
        advice += "   - Buying in bulk for non-perishable items\n"
    else:
        advice += "   - Reviewing subscriptions and canceling unnecessary ones\n"
        advice += "   - Looking for cheaper alternatives\n"
        advice += "   - Setting a strict budget for this category\n"

    advice += "\n2. General expense reduction strategies:\n"
    advice += "   - Create a detailed budget and track all expenses\n"
    advice += "   - Use the 50/30/20 rule: 50% for needs, 30% for wants, 20% for savings\n"
    advice += "   - Look for recurring subscriptions you can cancel\n"
    advice += "   - Consider negotiating bills like insurance, internet, and phone plans\n"
    advice += "   - Use cash-back or rewards credit cards for purchases you already make\n"
    return advice


def asset_growth_advice(data: FinancialData, today: date) -> str:
    categories = {a.category for a in data.assets}

    advice = "Here are strategies to increase your assets and build wealth:\n\n"
    advice += "1. Based on your current assets:\n"

    if "Real Estate" not in categories:
        advice += "   - Consider investing in real estate for long-term appreciation and rental income\n"
    else:
        advice += "   - Look for opportunities to increase the value of your existing properties\n"
        advice += "   - Consider refinancing to access equity for additional investments\n"

    if "Investments" not in categories:
        advice += "   - Start investing in stocks, bonds, or ETFs for long-term growth\n"
    else:
        advice += "   - Diversify your investment portfolio across different asset classes\n"
        advice += "   - Consider increasing your regular investment contributions\n"

    if "Business" not in categories:
        advice += "   - Explore starting a side business or investing in existing businesses\n"
    else:
        advice += "   - Look for ways to scale your existing business operations\n"
        advice += "   - Consider reinvesting profits to grow the business\n"

    advice += "\n2. General strategies to increase assets:\n"
    advice += "   - Increase your savings rate to invest more money\n"
    advice += "   - Focus on building passive income streams (rental properties, dividends, etc.)\n"
    advice += "   - Invest in your skills and education to increase earning potential\n"
    advice += "   - Consider tax-advantaged accounts like 401(k)s, IRAs, or HSAs\n"
    advice += "   - Look for opportunities to convert expenses into assets (e.g., buying a home instead of renting)\n"
    return advice


def debt_reduction_advice(data: FinancialData, today: date) -> str:
    high_interest = [l for l in data.liabilities if l.interest_rate > HIGH_INTEREST_RATE]
    total_liabilities = sum(l.amount for l in data.liabilities)

    advice = "Here are strategies to reduce your liabilities and become debt-free:\n\n"
    advice += "1. Based on your current liabilities:\n"

    if high_interest:
        advice += "   - Prioritize paying off high-interest debt first (debt avalanche method)\n"
        advice += "   - Consider debt consolidation or refinancing to lower interest rates\n"

    if total_liabilities > 0:
        allocation = min(20, max(5, (data.summary.cash_flow / total_liabilities) * 100))
        advice += "   - Create a debt repayment plan with specific timelines\n"
        advice += f"   - Allocate {fixed(allocation, 0)}% of your monthly cash flow to debt repayment\n"

    advice += "\n2. Specific debt reduction strategies:\n"
    advice += "   - Use the debt snowball method: pay minimum on all debts, then put extra toward the smallest debt\n"
    advice += "   - Consider balance transfer cards with 0% introductory rates for credit card debt\n"
    advice += "   - Look for ways to increase your income to accelerate debt repayment\n"
    advice += "   - Cut unnecessary expenses to free up more money for debt payments\n"
    advice += "   - Consider selling assets to pay down high-interest debt\n"
    return advice


def goal_achievement_advice(data: FinancialData, today: date) -> str:
    horizons = [months_between(today, g.target_date) for g in data.goals]
    has_short_term = any(months <= 12 for months in horizons)
    has_long_term = any(months > 12 for months in horizons)

    advice = "Here are strategies to help you achieve your financial goals:\n\n"
    advice += "1. Based on your current goals:\n"

    if has_short_term:
        advice += "   - For short-term goals (within 1 year), focus on saving a specific amount each month\n"
        advice += "   - Consider using a high-yield savings account for short-term goals\n"

    if has_long_term:
        advice += "   - For long-term goals, invest in growth-oriented assets like stocks or real estate\n"
        advice += "   - Take advantage of compound interest by starting early\n"

    advice += "\n2. General strategies to achieve your goals:\n"
    advice += "   - Make your goals SMART: Specific, Measurable, Achievable, Relevant, Time-bound\n"
    advice += "   - Automate savings and investments to ensure consistent progress\n"
    advice += "   - Review your goals regularly and adjust as needed\n"
    advice += "   - Celebrate small wins along the way to stay motivated\n"
    advice += "   - Consider using apps or tools to track your progress\n"
    return advice


def general_advice(data: FinancialData, today: date) -> str:
    active_income = sum(i.amount for i in data.incomes if i.type == IncomeType.active)
    passive_share = (data.summary.passive_income / active_income) * 100 if active_income > 0 else 0.0
    total_expenses = sum(e.amount for e in data.expenses)
    total_assets = sum(a.value for a in data.assets)
    total_liabilities = sum(l.amount for l in data.liabilities)

    advice = "Based on your financial data, here's a comprehensive overview and advice:\n\n"

    advice += (
        f"1. Income: Your active income is {fixed(active_income, 2)}, "
        f"with {fixed(passive_share, 1)}% coming from passive sources. "
    )
    advice += "To increase your income:\n"
    advice += "   - Look for opportunities to increase your active income (raises, side hustles)\n"
    advice += "   - Focus on building passive income streams (investments, rental properties)\n"
    advice += "   - Develop new skills that command higher pay\n\n"

    advice += f"2. Expenses: Your monthly expenses total {fixed(total_expenses, 2)}. "
    advice += "To optimize your spending:\n"
    advice += "   - Review your largest expense categories for potential savings\n"
    advice += "   - Consider the 50/30/20 budget rule\n"
    advice += "   - Look for ways to reduce recurring expenses\n\n"

    advice += f"3. Assets: Your total assets are valued at {fixed(total_assets, 2)}. "
    advice += "To grow your assets:\n"
    advice += "   - Diversify your investments across different asset classes\n"
    advice += "   - Reinvest returns to take advantage of compound growth\n"
    advice += "   - Consider tax-advantaged investment accounts\n\n"

    advice += f"4. Liabilities: Your total liabilities are {fixed(total_liabilities, 2)}. "
    advice += "To reduce your debt:\n"
    advice += "   - Prioritize high-interest debt first\n"
    advice += "   - Consider debt consolidation for lower interest rates\n"
    advice += "   - Create a specific debt repayment plan\n\n"

    advice += f"5. Net Worth: Your current net worth is {fixed(data.summary.net_worth, 2)}. "
    advice += "To increase your net worth:\n"
    advice += "   - Focus on increasing assets while reducing liabilities\n"
    advice += "   - Maintain a positive cash flow to fund investments\n"
    advice += "   - Set specific net worth goals and track progress regularly\n\n"

    advice += f"6. Goals: You have {len(data.goals)} financial goals. "
    advice += "To achieve your goals:\n"
    advice += "   - Prioritize goals based on importance and timeline\n"
    advice += "   - Allocate your resources (time, money) accordingly\n"
    advice += "   - Review and adjust your goals regularly\n"
    return advice


# El orden es la prioridad
ADVICE_RULES: List[AdviceRule] = [
    (_wants_expense_reduction, expense_reduction_advice),
    (_wants_asset_growth, asset_growth_advice),
    (_wants_debt_reduction, debt_reduction_advice),
    (_wants_goal_help, goal_achievement_advice),
]


def select_template(query: str) -> AdviceTemplate:
    lower_query = query.lower()
    for matches, template in ADVICE_RULES:
        if matches(lower_query):
            return template
    return general_advice


def generate_financial_advice(query: str, data: FinancialData, today: Optional[date] = None) -> str:
    template = select_template(query)
    return template(data, today or date.today())
