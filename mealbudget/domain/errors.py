"""Error taxonomy for planner state transitions.

Every error is raised with the owning state left untouched, so callers can
recover locally. The API layer maps them onto HTTP status codes.
"""


class PlannerError(Exception):
    """Base class for recoverable planner errors."""


class InvalidSlotError(PlannerError):
    def __init__(self, day, meal_type):
        self.day = day
        self.meal_type = meal_type
        super().__init__(f"Invalid slot: day={day!r}, meal_type={meal_type!r}")


class NotFoundError(PlannerError):
    def __init__(self, kind: str, key):
        self.kind = kind
        self.key = key
        super().__init__(f"{kind} not found: {key!r}")


class InvalidInputError(PlannerError):
    pass
