from typing import Optional

from fastapi import APIRouter, Depends, Query

from mealbudget.api.deps import get_planner
from mealbudget.logic.recipes.suggestions import recipes_for_meal_type
from mealbudget.logic.state.planner_state import PlannerStateManager

router = APIRouter(prefix="/api/recipes", tags=["recipes"])


def _listing(recipes):
    return {"count": len(recipes), "recipes": [r.to_dict() for r in recipes]}


@router.get("")
def list_recipes(q: str = Query(default="", description="Matches recipe names and ingredients"),
                 type: Optional[str] = Query(default=None, description="breakfast, lunch or dinner"),
                 planner: PlannerStateManager = Depends(get_planner)):
    """Search the catalog; with ?type= only recipes that fit that meal slot."""
    recipes = planner.search(q)
    if type is not None:
        recipes = recipes_for_meal_type(recipes, type)
    return _listing(recipes)


@router.get("/favorites")
def list_favorites(planner: PlannerStateManager = Depends(get_planner)):
    return _listing(planner.favorites())


@router.get("/suggestions")
def list_suggestions(planner: PlannerStateManager = Depends(get_planner)):
    """
    Recipes partially covered by the pantry.

    Response JSON structure:
        { "count": <int>, "recipes": [ { id, name, ..., owned, total, missing } ] }
    """
    entries = planner.suggestion_entries()
    return {"count": len(entries), "recipes": entries}


@router.get("/ready")
def list_ready_to_cook(planner: PlannerStateManager = Depends(get_planner)):
    return _listing(planner.ready_to_cook())


@router.post("/{recipe_id}/favorite")
def toggle_favorite(recipe_id: int, planner: PlannerStateManager = Depends(get_planner)):
    recipe = planner.toggle_favorite(recipe_id)
    return {"recipe": recipe.to_dict()}
