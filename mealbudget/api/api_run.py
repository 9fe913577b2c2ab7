from typing import Optional
import logging

from fastapi import FastAPI, APIRouter, Depends, Query, Request, Response
from fastapi.responses import JSONResponse

from mealbudget.api.deps import get_planner, get_recorder
from mealbudget.api.routes import budget, pantry, recipes, shopping
from mealbudget.domain.errors import InvalidInputError, InvalidSlotError, NotFoundError, PlannerError
from mealbudget.events.web_observers import EventRecorder
from mealbudget.infra.pdf_utils import generate_plan_pdf
from mealbudget.logic.budget.expenses import format_money
from mealbudget.logic.state.planner_state import PlannerStateManager
from mealbudget.utilities.constants import DAYS, MEAL_TYPES
from mealbudget.utilities.validators import SlotAssignInput

# Logging
logger = logging.getLogger("mealbudget_app")

ERROR_STATUS = {
    InvalidSlotError: 400,
    InvalidInputError: 400,
    NotFoundError: 404,
}

# Initialize FastAPI app
app = FastAPI(title="Meal Planner & Budget Tracker API")
router = APIRouter()


@app.exception_handler(PlannerError)
async def planner_error_handler(request: Request, exc: PlannerError):
    """Planner errors leave state untouched; report them instead of failing the request."""
    status = next((code for cls, code in ERROR_STATUS.items() if isinstance(exc, cls)), 400)
    logger.warning("%s %s -> %d %s: %s", request.method, request.url.path, status, type(exc).__name__, exc)
    return JSONResponse(status_code=status, content={"detail": str(exc), "error": type(exc).__name__})


# -------------------- Helpers --------------------
def _plan_payload(planner: PlannerStateManager):
    with planner.lock:
        plan, expense_total = planner.plan, planner.expense_total
    return {
        "days": list(DAYS),
        "meal_types": list(MEAL_TYPES),
        "plan": plan.to_dict(),
        "expense_total": expense_total,
        "expense_total_formatted": format_money(expense_total),
    }


# -------------------- API: Weekly plan --------------------
@router.get('/api/plan')
def api_plan(planner: PlannerStateManager = Depends(get_planner)):
    return _plan_payload(planner)


@router.put('/api/plan/{day}/{meal_type}')
def api_assign_meal(day: str, meal_type: str, payload: SlotAssignInput,
                    planner: PlannerStateManager = Depends(get_planner)):
    """Put a catalog recipe in a slot; the shopping list and expenses are recomputed before responding."""
    planner.assign_recipe_id(day, meal_type, payload.recipe_id)
    return _plan_payload(planner)


@router.delete('/api/plan/{day}/{meal_type}')
def api_clear_meal(day: str, meal_type: str, planner: PlannerStateManager = Depends(get_planner)):
    planner.clear(day, meal_type)
    return _plan_payload(planner)


@router.post('/api/plan/reset')
def api_reset_plan(planner: PlannerStateManager = Depends(get_planner)):
    planner.reset_plan()
    return _plan_payload(planner)


@router.get("/api/plan/pdf")
def export_plan_pdf(planner: PlannerStateManager = Depends(get_planner)):
    pdf_bytes = generate_plan_pdf(planner.plan, planner.expense_total)

    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={
            "Content-Disposition": "attachment; filename=meal_plan.pdf"
        },
    )


# -------------------- API: State change events --------------------
@router.get('/api/events')
def api_events(
    since: Optional[int] = Query(default=None, description="Return events with id greater than this value"),
    planner: PlannerStateManager = Depends(get_planner),
    recorder: EventRecorder = Depends(get_recorder),
):
    """
    Return recent planner events (plan/pantry/budget changes and recomputations).

    Client polling strategy:
        1. First call without 'since' to load the current backlog.
        2. Store 'next_cursor' from response.
        3. Subsequent polls: /api/events?since=<next_cursor>
    """
    recorder.start(planner.event_bus)
    return recorder.get_events(since)


app.include_router(router)
app.include_router(pantry.router)
app.include_router(shopping.router)
app.include_router(recipes.router)
app.include_router(budget.router)
