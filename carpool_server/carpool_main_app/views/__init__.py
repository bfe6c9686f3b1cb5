"""Views package - HTTP request handlers"""

# Import from domain-specific view files
from .location_views import LocationViewSet
from .user_views import UserViewSet
from .ride_views import RideViewSet
from .page_views import index
from .error_views import route_not_found, server_error

__all__ = [
    'LocationViewSet', 'UserViewSet', 'RideViewSet',
    'index', 'route_not_found', 'server_error',
]
