from fastapi import APIRouter, Depends

from mealbudget.api.deps import get_planner
from mealbudget.logic.state.planner_state import PlannerStateManager
from mealbudget.utilities.validators import BudgetInput

router = APIRouter(prefix="/api/budget", tags=["budget"])


@router.get("")
def get_budget(planner: PlannerStateManager = Depends(get_planner)):
    return planner.budget_summary()


@router.put("")
def set_budget(payload: BudgetInput, planner: PlannerStateManager = Depends(get_planner)):
    planner.set_budget(payload.amount)
    return planner.budget_summary()


@router.get("/history")
def get_expense_history(planner: PlannerStateManager = Depends(get_planner)):
    return planner.expense_history_chart()
