"""User-related views"""
from rest_framework import viewsets, status
from rest_framework.response import Response
from rest_framework.permissions import AllowAny

from ..serializers import CarpoolUserSerializer, UserCreateSerializer
from ..services import UserService
from .base import RideBoardViewMixin


class UserViewSet(RideBoardViewMixin, viewsets.ViewSet):
    permission_classes = [AllowAny]
    authentication_classes = []

    failure_messages = {
        'create': 'Failed to create user',
    }

    def create(self, request):
        serializer = UserCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        user = UserService().create_user(**serializer.validated_data)
        return Response(CarpoolUserSerializer(user).data, status=status.HTTP_201_CREATED)
