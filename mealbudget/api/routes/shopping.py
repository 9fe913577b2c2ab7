from fastapi import APIRouter, Depends, Response

from mealbudget.api.deps import get_planner
from mealbudget.infra.pdf_utils import generate_shopping_list_pdf
from mealbudget.logic.state.planner_state import PlannerStateManager
from mealbudget.utilities.validators import ShoppingItemToggleInput

router = APIRouter(prefix="/api/shopping-list", tags=["shopping"])


def _shopping_payload(planner: PlannerStateManager):
    return {"items": planner.shopping_list.to_dict(), **planner.shopping_summary()}


@router.get("")
def get_shopping_list(planner: PlannerStateManager = Depends(get_planner)):
    """Derived list: ingredients of planned meals not already in the pantry."""
    return _shopping_payload(planner)


@router.post("/toggle")
def toggle_item(payload: ShoppingItemToggleInput, planner: PlannerStateManager = Depends(get_planner)):
    planner.toggle_shopping_item(payload.name)
    return _shopping_payload(planner)


@router.get("/pdf")
def export_shopping_list_pdf(planner: PlannerStateManager = Depends(get_planner)):
    pdf_bytes = generate_shopping_list_pdf(planner.shopping_list)
    return Response(
        content=pdf_bytes,
        media_type="application/pdf",
        headers={"Content-Disposition": "attachment; filename=shopping_list.pdf"},
    )
