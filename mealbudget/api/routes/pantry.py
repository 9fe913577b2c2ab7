from fastapi import APIRouter, Depends

from mealbudget.api.deps import get_planner
from mealbudget.logic.state.planner_state import PlannerStateManager
from mealbudget.utilities.validators import PantryItemInput

router = APIRouter(prefix="/api/pantry", tags=["pantry"])


def _pantry_payload(planner: PlannerStateManager):
    with planner.lock:
        pantry, shopping_list = planner.pantry, planner.shopping_list
    return {
        "items": pantry.get_items(),
        "count": len(pantry),
        "shopping_list": shopping_list.to_dict(),
    }


@router.get("")
def list_pantry(planner: PlannerStateManager = Depends(get_planner)):
    return _pantry_payload(planner)


@router.post("")
def add_pantry_item(payload: PantryItemInput, planner: PlannerStateManager = Depends(get_planner)):
    """Add an item; an existing item is reported with added=False."""
    added = planner.add_pantry_item(payload.item)
    return {"added": added, **_pantry_payload(planner)}


@router.delete("/{item:path}")
def remove_pantry_item(item: str, planner: PlannerStateManager = Depends(get_planner)):
    removed = planner.remove_pantry_item(item)
    return {"removed": removed, **_pantry_payload(planner)}
