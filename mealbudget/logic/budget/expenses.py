"""Expense and budget calculations.

compute_expense_total(plan) is the derived weekly expense; the remaining
helpers shape budget figures and the static expense history for display.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Iterable, List

from mealbudget.domain.WeeklyPlan import WeeklyPlan
from mealbudget.utilities.constants import EXPENSE_CHART_TICK_COUNT, MONEY_FORMAT

__all__ = [
    "compute_expense_total", "compute_budget_summary", "compute_expense_chart",
    "format_money", "round_half_up",
]


def compute_expense_total(plan: WeeklyPlan) -> float:
    """Sum of cost over every non-empty slot. No rounding while accumulating."""
    total = 0.0
    for recipe in plan.planned_recipes():
        total += recipe.cost
    return total


def format_money(amount: float) -> str:
    return MONEY_FORMAT.format(amount)


def round_half_up(value: float) -> int:
    """Round like a price tag does: 12.5 -> 13 (Python's round() would give 12)."""
    return int(math.floor(value + 0.5))


def _percent_used(expenses: float, budget: float) -> int:
    if budget <= 0:
        return 0 if expenses <= 0 else 100
    return min(round_half_up(expenses / budget * 100), 100)


def compute_budget_summary(expenses: float, budget: float) -> Dict[str, Any]:
    """Compare the derived weekly expenses with the user's budget."""
    remaining = budget - expenses
    return {
        "expenses": expenses,
        "budget": budget,
        "remaining": remaining,
        "percent_used": _percent_used(expenses, budget),
        "over_budget": expenses > budget,
        "within_budget": remaining > 0,
        "formatted": {
            "expenses": format_money(expenses),
            "budget": format_money(budget),
            "remaining": format_money(remaining),
        },
    }


def compute_expense_chart(history: Iterable[Dict[str, Any]], *, ceiling: float) -> Dict[str, Any]:
    """Bars for the expense history chart.

    Each bar height is a percentage of the fixed chart ceiling (values above
    the ceiling are not clipped, matching how the chart scales them).

    Returns:
        { "bars": [ { week, label, amount, height_percent } ], "ticks": [120, 90, ...], "ceiling": 120 }
    """
    bars: List[Dict[str, Any]] = []
    for entry in history:
        amount = float(entry.get("amount", 0))
        bars.append({
            "week": entry.get("week"),
            "label": f"W{entry.get('week')}",
            "amount": amount,
            "height_percent": (amount / ceiling) * 100 if ceiling > 0 else 0.0,
        })
    steps = EXPENSE_CHART_TICK_COUNT - 1
    ticks = [round_half_up(ceiling * (steps - i) / steps) for i in range(EXPENSE_CHART_TICK_COUNT)]
    return {"bars": bars, "ticks": ticks, "ceiling": ceiling}
