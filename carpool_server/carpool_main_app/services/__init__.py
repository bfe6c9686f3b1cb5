"""Services package - business logic layer"""

from .location_service import LocationService
from .user_service import UserService
from .ride_service import RideService
from .interest_service import InterestService

__all__ = [
    'LocationService',
    'UserService',
    'RideService',
    'InterestService',
]
