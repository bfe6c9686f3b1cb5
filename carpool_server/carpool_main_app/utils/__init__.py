"""Utils package - helper functions and utilities"""

from .constants import LocationType, PostType, ContactMethod, Weekday, BusinessRules, choice_values

__all__ = [
    'LocationType',
    'PostType',
    'ContactMethod',
    'Weekday',
    'BusinessRules',
    'choice_values',
]
