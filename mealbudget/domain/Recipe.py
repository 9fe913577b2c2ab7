"""Recipe domain entity: id, name, meal type, ingredient names, cost, favorite flag, image."""
from typing import List, Optional

from pydantic import ValidationError

from mealbudget.domain.errors import InvalidInputError, NotFoundError
from mealbudget.utilities.validators import RecipeRecord


class Recipe:
    def __init__(self, id: int, name: str, type: str, ingredients: Optional[List[str]] = None,
                 cost: float = 0.0, favorite: bool = False, image: str = ""):
        self.id = id
        self.name = name
        self.type = type
        # Stored as a tuple: plans and derivations share recipes by reference
        self.ingredients = tuple(ingredients or ())
        self.cost = cost
        self.favorite = favorite
        self.image = image

    def __str__(self) -> str:
        fav = " *" if self.favorite else ""
        return f"{self.name}{fav} ({self.type}) - ${self.cost:.2f} - Ingredients: {', '.join(self.ingredients)}"

    __repr__ = __str__

    def __eq__(self, other):
        if not isinstance(other, Recipe):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __hash__(self):
        return hash((self.id, self.name, self.type, self.ingredients, self.cost, self.favorite))

    def with_favorite(self, favorite: bool) -> "Recipe":
        '''Returns a copy of this recipe with the favorite flag replaced.'''
        return Recipe(self.id, self.name, self.type, list(self.ingredients), self.cost, favorite, self.image)

    @staticmethod
    def from_dict(data):
        '''Creates a Recipe from a catalog record, validating required fields.'''
        try:
            record = RecipeRecord.model_validate(data)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid recipe record {data!r}: {e}") from e
        return Recipe(**record.model_dump())

    def to_dict(self):
        return {
            "id": self.id,
            "name": self.name,
            "type": self.type,
            "ingredients": list(self.ingredients),
            "cost": self.cost,
            "favorite": self.favorite,
            "image": self.image,
        }


class RecipeCatalog:
    """Ordered, id-indexed collection of recipes. Mutators return a new catalog."""

    def __init__(self, recipes: Optional[List[Recipe]] = None):
        self._recipes = tuple(recipes or ())
        self._index = {r.id: r for r in self._recipes}
        if len(self._index) != len(self._recipes):
            raise InvalidInputError("Recipe ids must be unique")

    def __iter__(self):
        return iter(self._recipes)

    def __len__(self):
        return len(self._recipes)

    def __eq__(self, other):
        if not isinstance(other, RecipeCatalog):
            return NotImplemented
        return self._recipes == other._recipes

    def __repr__(self) -> str:
        return f"RecipeCatalog({len(self._recipes)} recipes)"

    def get(self, recipe_id: int) -> Optional[Recipe]:
        return self._index.get(recipe_id)

    def require(self, recipe_id: int) -> Recipe:
        recipe = self._index.get(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def toggle_favorite(self, recipe_id: int) -> "RecipeCatalog":
        '''Returns a new catalog with the favorite flag of recipe_id flipped.'''
        target = self.require(recipe_id)
        flipped = target.with_favorite(not target.favorite)
        return RecipeCatalog([flipped if r.id == recipe_id else r for r in self._recipes])

    def get_recipes(self) -> List[Recipe]:
        return list(self._recipes)

    @staticmethod
    def from_dict(data):
        return RecipeCatalog([Recipe.from_dict(entry) for entry in data])

    def to_dict(self):
        return [r.to_dict() for r in self._recipes]
