"""Field-level checks shared by the planning services

Every check raises planui.services.errors.ValidationError and is meant to
run before anything is written.
"""

from collections import Counter
from enum import Enum
from typing import Iterable, List, Optional, Type

from planui.services.errors import ValidationError


def require_text(value: Optional[str], field: str) -> str:
    """the value must be a non-blank string; returns it stripped"""
    if value is None or not str(value).strip():
        raise ValidationError(f"{field} is required")
    return str(value).strip()


def require_choice(value: Optional[str], choices: Type[Enum], field: str) -> str:
    """the value must be one of the enum's values"""
    allowed = [choice.value for choice in choices]
    if value not in allowed:
        raise ValidationError(f"Invalid {field} '{value}'. Must be one of: {', '.join(allowed)}")
    return value


def validate_goal(goal: Optional[float]) -> None:
    """a goal is absent or lies in [0, 1]"""
    if goal is None:
        return
    if not 0.0 <= goal <= 1.0:
        raise ValidationError(f"goal must lie between 0 and 1, got {goal}")


def duplicates(ids: Iterable[int]) -> List[int]:
    """ids that appear more than once, sorted"""
    return sorted(layer_id for layer_id, count in Counter(ids).items() if count > 1)
