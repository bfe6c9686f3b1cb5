"""Location-related views"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from ..serializers import LocationSerializer, LocationInputSerializer
from ..services import LocationService
from .base import RideBoardViewMixin


class LocationViewSet(RideBoardViewMixin, viewsets.ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []

    failure_messages = {
        'list': 'Failed to fetch locations',
        'create': 'Failed to create location',
    }

    def list(self, request):
        locations = LocationService().list_locations()
        return Response(LocationSerializer(locations, many=True).data)

    def create(self, request):
        serializer = LocationInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        location, created = LocationService().get_or_create(**serializer.validated_data)
        return Response(
            LocationSerializer(location).data,
            status=status.HTTP_201_CREATED if created else status.HTTP_200_OK,
        )


__all__ = ['LocationViewSet']
