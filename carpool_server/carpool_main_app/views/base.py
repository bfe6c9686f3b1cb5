"""Error mapping shared by the API viewsets"""
import logging

from django.db import DatabaseError
from rest_framework import status, exceptions
from rest_framework.response import Response

from ..exceptions import NotFoundError, DuplicateError
from ..serializers import first_error
from ..utils.storage import is_fatal_pool_error, request_shutdown

logger = logging.getLogger(__name__)


class RideBoardViewMixin:
    """Turn serializer and service errors into ``{'error': message}`` responses"""

    # action -> message shown to the client when the database fails
    failure_messages = {}

    def handle_exception(self, exc):
        # Invalid fields, non-object bodies and unparseable JSON
        if isinstance(exc, (exceptions.ValidationError, exceptions.ParseError)):
            return Response({'error': first_error(exc.detail)}, status=status.HTTP_400_BAD_REQUEST)

        if isinstance(exc, DuplicateError):
            return Response({'error': str(exc)}, status=status.HTTP_400_BAD_REQUEST)

        if isinstance(exc, NotFoundError):
            return Response({'error': str(exc)}, status=status.HTTP_404_NOT_FOUND)

        if isinstance(exc, DatabaseError):
            message = self.failure_messages.get(self.action, 'Internal server error')
            logger.exception(f'[DB] {message}')
            if is_fatal_pool_error(exc):
                request_shutdown(exc)
            return Response({'error': message}, status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return super().handle_exception(exc)
