"""Models package - domain-based organization"""

# Location models
from .location import Location

# User models
from .user import CarpoolUser

# Ride models
from .ride import RidePost

# Interest models
from .interest import RideInterest

__all__ = ['Location', 'CarpoolUser', 'RidePost', 'RideInterest']
