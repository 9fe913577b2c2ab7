"""WeeklyPlan value object: 7 days x 3 meal slots, each empty or holding one Recipe."""
from typing import Dict, Iterator, Optional, Tuple

from mealbudget.domain.Recipe import Recipe
from mealbudget.domain.errors import InvalidInputError, InvalidSlotError
from mealbudget.utilities.constants import DAYS, MEAL_TYPES


class WeeklyPlan:
    def __init__(self, meals: Optional[Dict[str, Dict[str, Optional[Recipe]]]] = None):
        # Always materialise all 21 slots so readers never see a missing key
        self._meals = {day: {meal_type: None for meal_type in MEAL_TYPES} for day in DAYS}
        for day, slots in (meals or {}).items():
            for meal_type, recipe in slots.items():
                self._check_slot(day, meal_type)
                self._meals[day][meal_type] = recipe

    @staticmethod
    def _check_slot(day: str, meal_type: str):
        if day not in DAYS or meal_type not in MEAL_TYPES:
            raise InvalidSlotError(day, meal_type)

    @property
    def meals(self) -> Dict[str, Dict[str, Optional[Recipe]]]:
        '''Copy of the day -> meal type -> recipe mapping.'''
        return {day: dict(slots) for day, slots in self._meals.items()}

    def get(self, day: str, meal_type: str) -> Optional[Recipe]:
        self._check_slot(day, meal_type)
        return self._meals[day][meal_type]

    def assign(self, day: str, meal_type: str, recipe: Recipe) -> "WeeklyPlan":
        '''Returns a new plan with the slot set to recipe (overwrites any previous value).'''
        self._check_slot(day, meal_type)
        if not isinstance(recipe, Recipe):
            raise InvalidInputError(f"Expected a Recipe for {day} {meal_type}, got {recipe!r}")
        meals = self.meals
        meals[day][meal_type] = recipe
        return WeeklyPlan(meals)

    def clear(self, day: str, meal_type: str) -> "WeeklyPlan":
        '''Returns a new plan with the slot emptied; an already empty slot yields an equal plan.'''
        self._check_slot(day, meal_type)
        meals = self.meals
        meals[day][meal_type] = None
        return WeeklyPlan(meals)

    def slots(self) -> Iterator[Tuple[str, str, Optional[Recipe]]]:
        '''Yields (day, meal_type, recipe) in calendar order, breakfast to dinner.'''
        for day in DAYS:
            for meal_type in MEAL_TYPES:
                yield day, meal_type, self._meals[day][meal_type]

    def planned_recipes(self) -> Iterator[Recipe]:
        for _, _, recipe in self.slots():
            if recipe is not None:
                yield recipe

    def is_empty(self) -> bool:
        return next(self.planned_recipes(), None) is None

    def __eq__(self, other):
        if not isinstance(other, WeeklyPlan):
            return NotImplemented
        return self._meals == other._meals

    def __str__(self) -> str:
        lines = []
        for day in DAYS:
            cells = [f"{mt}: {r.name if r else '-'}" for mt, r in self._meals[day].items()]
            lines.append(f"{day}: " + ", ".join(cells))
        return "\n".join(lines)

    __repr__ = __str__

    def to_dict(self):
        return {
            day: {mt: (r.to_dict() if r else None) for mt, r in slots.items()}
            for day, slots in self._meals.items()
        }
