"""Errors raised by the planning services"""


class PlanningServiceError(Exception):
    """Base exception for planning service errors"""

    def __init__(self, message: str, error_code: str = "PLANNING_ERROR"):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ValidationError(PlanningServiceError):
    """Raised when an input violates a declared constraint"""

    def __init__(self, message: str):
        super().__init__(message, "VALIDATION_ERROR")


class NotFoundError(PlanningServiceError):
    """Raised when an id does not name an existing row"""

    def __init__(self, entity: str, entity_id):
        super().__init__(f"{entity} with id {entity_id} not found", "NOT_FOUND")
        self.entity = entity
        self.entity_id = entity_id


class ReferentialError(PlanningServiceError):
    """Raised when a referenced row exists but breaks a cross-entity rule"""

    def __init__(self, message: str):
        super().__init__(message, "REFERENTIAL_ERROR")
