"""Interest service - people asking to join a ride"""
import logging

from django.db import transaction, IntegrityError

from ..exceptions import NotFoundError, DuplicateInterestError
from ..models import RidePost, RideInterest
from ..utils.storage import is_unique_violation

logger = logging.getLogger(__name__)


class InterestService:
    """Service for interest operations"""

    def list_for_ride(self, ride_id):
        return list(
            RideInterest.objects.filter(ride_id=ride_id)
            .order_by('-created_at', '-interest_id')
            .values('interested_name', 'contact_method', 'contact_info', 'created_at')
        )

    def create_interest(self, ride_id, interested_name, contact_method, contact_info):
        """
        Record interest in an active ride

        The (ride, lower(name)) unique constraint is the only duplicate guard, so two
        identical submissions racing each other cannot both succeed.

        Raises:
            NotFoundError: If the ride does not exist or is inactive
            DuplicateInterestError: If this name already showed interest in the ride
        """
        if not RidePost.objects.filter(pk=ride_id, is_active=True).exists():
            raise NotFoundError("Ride not found")

        try:
            with transaction.atomic():
                interest = RideInterest.objects.create(
                    ride_id=ride_id,
                    interested_name=interested_name,
                    contact_method=contact_method,
                    contact_info=contact_info,
                )
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            raise DuplicateInterestError("You already showed interest in this ride")

        logger.info(f'[INTERESTS] Interest {interest.interest_id} added to ride {ride_id}')
        return interest
