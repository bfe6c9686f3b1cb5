"""User service - contact snapshots attached to ride posts"""
import logging

from ..models import CarpoolUser

logger = logging.getLogger(__name__)


class UserService:
    """Service for user operations"""

    def create_user(self, name, contact_method, contact_info):
        """Create a user record; identical submissions produce distinct rows"""
        user = CarpoolUser.objects.create(
            name=name,
            contact_method=contact_method,
            contact_info=contact_info,
        )
        logger.info(f'[USERS] Created user {user.user_id}')
        return user
