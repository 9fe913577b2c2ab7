import unittest
from mealbudget.domain.Recipe import Recipe
from mealbudget.domain.WeeklyPlan import WeeklyPlan
from mealbudget.logic.budget.expenses import (
    compute_budget_summary, compute_expense_chart, compute_expense_total, format_money, round_half_up
)


class TestExpenseTotal(unittest.TestCase):

    def test_empty_plan_costs_nothing(self):
        self.assertEqual(compute_expense_total(WeeklyPlan()), 0)

    def test_sum_of_assigned_costs(self):
        toast = Recipe(1, "Avocado Toast", "breakfast", ["bread"], 5.50)
        salad = Recipe(2, "Chicken Salad", "lunch", ["lettuce"], 8.75)
        plan = WeeklyPlan().assign("Monday", "breakfast", toast).assign("Monday", "lunch", salad)
        self.assertAlmostEqual(compute_expense_total(plan), 14.25)

    def test_same_recipe_counts_per_slot(self):
        toast = Recipe(1, "Avocado Toast", "breakfast", ["bread"], 5.50)
        plan = WeeklyPlan()
        for day in ("Monday", "Tuesday", "Wednesday"):
            plan = plan.assign(day, "breakfast", toast)
        self.assertAlmostEqual(compute_expense_total(plan), 16.50)


class TestBudgetSummary(unittest.TestCase):

    def test_within_budget(self):
        summary = compute_budget_summary(14.25, 400)
        self.assertAlmostEqual(summary["remaining"], 385.75)
        self.assertEqual(summary["percent_used"], 4)
        self.assertFalse(summary["over_budget"])
        self.assertTrue(summary["within_budget"])
        self.assertEqual(summary["formatted"]["expenses"], "$14.25")

    def test_percent_is_capped(self):
        summary = compute_budget_summary(150, 100)
        self.assertEqual(summary["percent_used"], 100)
        self.assertTrue(summary["over_budget"])
        self.assertEqual(summary["formatted"]["remaining"], "$-50.00")

    def test_percent_rounds_half_up(self):
        self.assertEqual(compute_budget_summary(1, 200)["percent_used"], 1)
        self.assertEqual(round_half_up(2.5), 3)

    def test_zero_budget(self):
        self.assertEqual(compute_budget_summary(0, 0)["percent_used"], 0)
        self.assertEqual(compute_budget_summary(5, 0)["percent_used"], 100)

    def test_format_money(self):
        self.assertEqual(format_money(5.5), "$5.50")


class TestExpenseChart(unittest.TestCase):

    def test_bars_scale_to_ceiling(self):
        chart = compute_expense_chart([{"week": 1, "amount": 90}, {"week": 2, "amount": 60}], ceiling=120)
        self.assertEqual([b["label"] for b in chart["bars"]], ["W1", "W2"])
        self.assertAlmostEqual(chart["bars"][0]["height_percent"], 75.0)
        self.assertAlmostEqual(chart["bars"][1]["height_percent"], 50.0)
        self.assertEqual(chart["ticks"], [120, 90, 60, 30, 0])
