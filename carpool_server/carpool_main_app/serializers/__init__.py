"""Serializers package - imports from domain-specific modules"""

# Location serializers
from .location_serializers import (
    LocationSerializer,
    LocationInputSerializer,
)

# User serializers
from .user_serializers import (
    CarpoolUserSerializer,
    UserCreateSerializer,
)

# Ride and interest serializers
from .ride_serializers import (
    RidePostSerializer,
    RideCreateSerializer,
    RideUpdateSerializer,
    RideInterestSerializer,
    InterestCreateSerializer,
    InterestContactSerializer,
)

from .fields import first_error

__all__ = [
    'LocationSerializer',
    'LocationInputSerializer',
    'CarpoolUserSerializer',
    'UserCreateSerializer',
    'RidePostSerializer',
    'RideCreateSerializer',
    'RideUpdateSerializer',
    'RideInterestSerializer',
    'InterestCreateSerializer',
    'InterestContactSerializer',
    'first_error',
]
