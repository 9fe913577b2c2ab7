from typing import Final

DAYS: Final[tuple[str, ...]] = (
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"
)
MEAL_TYPES: Final[tuple[str, ...]] = ("breakfast", "lunch", "dinner")

# Number of horizontal gridlines on the expense history chart (0 .. ceiling)
EXPENSE_CHART_TICK_COUNT: Final[int] = 5
MONEY_FORMAT: Final[str] = "${:.2f}"
