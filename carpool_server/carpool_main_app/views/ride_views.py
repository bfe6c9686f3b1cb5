"""Ride-related views"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny
from rest_framework.decorators import action

from ..serializers import (
    RidePostSerializer, RideCreateSerializer, RideUpdateSerializer,
    RideInterestSerializer, InterestCreateSerializer, InterestContactSerializer,
)
from ..services import RideService, InterestService
from .base import RideBoardViewMixin


class RideViewSet(RideBoardViewMixin, viewsets.ViewSet):
    """Ride posts and the interests attached to them"""
    permission_classes = [AllowAny]
    authentication_classes = []
    lookup_value_regex = r'\d+'

    failure_messages = {
        'list': 'Failed to fetch rides',
        'retrieve': 'Failed to fetch ride',
        'create': 'Failed to create ride',
        'update': 'Failed to update ride',
        'destroy': 'Failed to delete ride',
        'interests': 'Failed to process interest',
    }

    def list(self, request):
        rides = RideService().list_active_rides()
        return Response(RidePostSerializer(rides, many=True).data)

    def retrieve(self, request, pk=None):
        ride = RideService().get_ride(int(pk))
        return Response(RidePostSerializer(ride).data)

    def create(self, request):
        serializer = RideCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride = RideService().create_ride(**serializer.validated_data)
        return Response(RidePostSerializer(ride).data, status=status.HTTP_201_CREATED)

    def update(self, request, pk=None):
        serializer = RideUpdateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        ride = RideService().update_ride(int(pk), **serializer.validated_data)
        return Response(RidePostSerializer(ride).data)

    def destroy(self, request, pk=None):
        RideService().deactivate_ride(int(pk))
        return Response({'message': 'Ride deactivated successfully'}, status=status.HTTP_200_OK)

    @action(detail=True, methods=['get', 'post'], url_path='interests')
    def interests(self, request, pk=None):
        service = InterestService()

        if request.method == 'GET':
            interests = service.list_for_ride(int(pk))
            return Response(InterestContactSerializer(interests, many=True).data)

        serializer = InterestCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        interest = service.create_interest(int(pk), **serializer.validated_data)
        return Response(RideInterestSerializer(interest).data, status=status.HTTP_201_CREATED)


__all__ = ['RideViewSet']
