"""Core business logic layer.

Subpackages:
- shopping: deriving the shopping list from the weekly plan and pantry
- budget: expense totals, budget summary and expense history chart
- recipes: suggestions, search and catalog views
- state: the planner state manager wiring mutations to derivations
"""
__all__ = ["shopping", "budget", "recipes", "state"]
