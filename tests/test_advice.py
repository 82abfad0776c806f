import unittest
from datetime import date

from factories import asset, expense, financial_data, goal, income, liability

from balancesheet.services.advice import (
    asset_growth_advice,
    debt_reduction_advice,
    expense_reduction_advice,
    fixed,
    general_advice,
    generate_financial_advice,
    goal_achievement_advice,
    select_template,
)

TODAY = date(2025, 1, 15)


class RulePriorityTests(unittest.TestCase):
    def test_expense_reduction_wins_over_every_other_keyword(self) -> None:
        query = "Reduce expenses so I can increase assets, pay off liability and reach my goal"

        self.assertIs(select_template(query), expense_reduction_advice)

    def test_spending_is_a_synonym_for_expense(self) -> None:
        self.assertIs(select_template("how to REDUCE my spending"), expense_reduction_advice)

    def test_asset_rule(self) -> None:
        self.assertIs(select_template("How can I increase my assets?"), asset_growth_advice)

    def test_liability_rule_accepts_reduce_or_pay_off(self) -> None:
        self.assertIs(select_template("pay off my liability"), debt_reduction_advice)
        self.assertIs(select_template("reduce liability"), debt_reduction_advice)

    def test_goal_rule_accepts_goal_or_reach(self) -> None:
        self.assertIs(select_template("my goal"), goal_achievement_advice)
        self.assertIs(select_template("how do I reach a million"), goal_achievement_advice)

    def test_unmatched_query_falls_back_to_overview(self) -> None:
        self.assertIs(select_template("What should I do?"), general_advice)
        # "reduce" alone is not enough for any rule
        self.assertIs(select_template("reduce"), general_advice)


class ExpenseReductionTests(unittest.TestCase):
    def test_largest_category_share_and_tips(self) -> None:
        data = financial_data(expenses=[expense("Housing", 750), expense("Food", 200), expense("Food", 50)])

        advice = generate_financial_advice("reduce expenses", data, today=TODAY)

        self.assertIn("Your largest expense category is Housing (75.0% of total expenses).", advice)
        self.assertIn("Refinancing your mortgage for a lower rate", advice)

    def test_food_category_tips(self) -> None:
        data = financial_data(expenses=[expense("Food", 300), expense("Fun", 100)])

        advice = expense_reduction_advice(data, TODAY)

        self.assertIn("Cooking at home instead of eating out", advice)
        self.assertNotIn("Downsizing", advice)

    def test_no_expenses_gives_zero_share(self) -> None:
        advice = expense_reduction_advice(financial_data(), TODAY)

        self.assertIn("(0.0% of total expenses)", advice)
        self.assertIn("Setting a strict budget for this category", advice)


class AssetGrowthTests(unittest.TestCase):
    def test_missing_asset_classes_are_suggested(self) -> None:
        advice = asset_growth_advice(financial_data(assets=[asset("Investments", 1000)]), TODAY)

        self.assertIn("Consider investing in real estate", advice)
        self.assertIn("Diversify your investment portfolio", advice)
        self.assertIn("Explore starting a side business", advice)


class DebtReductionTests(unittest.TestCase):
    def test_high_interest_branch(self) -> None:
        data = financial_data(liabilities=[liability(1000, 18)])

        advice = debt_reduction_advice(data, TODAY)

        self.assertIn("debt avalanche method", advice)

    def test_allocation_is_clamped_between_5_and_20_percent(self) -> None:
        generous = financial_data(incomes=[income(10000)], liabilities=[liability(1000, 3)])
        tight = financial_data(incomes=[income(100)], liabilities=[liability(100000, 3)])
        middle = financial_data(incomes=[income(120)], liabilities=[liability(1000, 3)])

        self.assertIn("Allocate 20% of your monthly cash flow", debt_reduction_advice(generous, TODAY))
        self.assertIn("Allocate 5% of your monthly cash flow", debt_reduction_advice(tight, TODAY))
        self.assertIn("Allocate 12% of your monthly cash flow", debt_reduction_advice(middle, TODAY))
        self.assertNotIn("debt avalanche", debt_reduction_advice(middle, TODAY))

    def test_allocation_tie_rounds_up(self) -> None:
        data = financial_data(incomes=[income(125)], liabilities=[liability(1000, 3)])

        advice = generate_financial_advice("pay off liability", data, today=TODAY)

        self.assertIn("Allocate 13% of your monthly cash flow", advice)

    def test_no_liabilities_skips_repayment_plan(self) -> None:
        advice = debt_reduction_advice(financial_data(), TODAY)

        self.assertNotIn("Allocate", advice)
        self.assertIn("debt snowball method", advice)


class GoalAchievementTests(unittest.TestCase):
    def test_short_and_long_term_goals(self) -> None:
        short_only = financial_data(goals=[goal(date(2026, 1, 31))])  # 12 meses
        long_only = financial_data(goals=[goal(date(2026, 2, 1))])  # 13 meses

        short_advice = goal_achievement_advice(short_only, TODAY)
        long_advice = goal_achievement_advice(long_only, TODAY)

        self.assertIn("For short-term goals (within 1 year)", short_advice)
        self.assertNotIn("For long-term goals", short_advice)
        self.assertIn("For long-term goals", long_advice)
        self.assertNotIn("For short-term goals", long_advice)


class GeneralAdviceTests(unittest.TestCase):
    def test_overview_interpolates_totals(self) -> None:
        data = financial_data(
            incomes=[income(4000), income(1000, "passive")],
            expenses=[expense("Food", 500)],
            assets=[asset("Investments", 20000)],
            liabilities=[liability(5000, 4)],
            goals=[goal(date(2030, 1, 1))],
        )

        advice = generate_financial_advice("hello", data, today=TODAY)

        self.assertTrue(advice.startswith("Based on your financial data, here's a comprehensive overview"))
        self.assertIn("Your active income is 4000.00, with 25.0% coming from passive sources.", advice)
        self.assertIn("Your monthly expenses total 500.00.", advice)
        self.assertIn("Your total assets are valued at 20000.00.", advice)
        self.assertIn("Your total liabilities are 5000.00.", advice)
        self.assertIn("Your current net worth is 15000.00.", advice)
        self.assertIn("You have 1 financial goals.", advice)

    def test_overview_figures_round_ties_up(self) -> None:
        data = financial_data(incomes=[income(0.125)], expenses=[expense("Food", 2.5)])

        advice = general_advice(data, TODAY)

        self.assertIn("Your active income is 0.13,", advice)
        self.assertIn("Your monthly expenses total 2.50.", advice)
        self.assertIn("Your current net worth is 0.00.", advice)

    def test_same_input_same_output(self) -> None:
        data = financial_data(incomes=[income(10)])

        self.assertEqual(
            generate_financial_advice("anything", data, today=TODAY),
            generate_financial_advice("anything", data, today=TODAY),
        )


class FixedFormatTests(unittest.TestCase):
    def test_ties_round_up(self) -> None:
        self.assertEqual(fixed(12.5, 0), "13")
        self.assertEqual(fixed(2.5, 0), "3")
        self.assertEqual(fixed(12.25, 1), "12.3")
        self.assertEqual(fixed(0.125, 2), "0.13")

    def test_pads_to_requested_digits(self) -> None:
        self.assertEqual(fixed(0, 2), "0.00")
        self.assertEqual(fixed(75, 1), "75.0")
        self.assertEqual(fixed(1234.5, 2), "1234.50")

    def test_non_ties_round_to_nearest(self) -> None:
        self.assertEqual(fixed(12.49, 0), "12")
        self.assertEqual(fixed(2.0 / 3 * 100, 1), "66.7")


if __name__ == "__main__":
    unittest.main()
