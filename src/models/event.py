from dataclasses import dataclass
from datetime import date
from enum import Enum


class EventCategory(Enum):
    HOUSING = "housing"
    CONTRACT = "contract"
    CAREER = "career"
    FAMILY = "family"
    EDUCATION = "education"
    OTHER = "other"


class EventColor(Enum):
    RED = "red"
    ORANGE = "orange"
    YELLOW = "yellow"
    GREEN = "green"
    BLUE = "blue"
    PURPLE = "purple"
    PINK = "pink"


@dataclass(frozen=True)
class LifeEvent:
    id: str
    title: str
    date: date
    category: EventCategory = EventCategory.OTHER
    description: str | None = None
    is_important: bool = False
    color: EventColor = EventColor.BLUE
    created_at: str | None = None
