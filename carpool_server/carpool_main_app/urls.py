from django.urls import path, include
from rest_framework import routers

from .views import LocationViewSet, UserViewSet, RideViewSet

router = routers.DefaultRouter(trailing_slash=False)
router.register(r"locations", LocationViewSet, basename="locations")
router.register(r"rides", RideViewSet, basename="rides")
router.register(r"users", UserViewSet, basename="users")

urlpatterns = [
    path('', include(router.urls)),
]
