"""Ride service - business logic for the ride post lifecycle"""
import logging

from django.utils import timezone

from ..exceptions import NotFoundError
from ..models import RidePost

logger = logging.getLogger(__name__)


class RideService:
    """Service for ride post operations"""

    def create_ride(self, user, post_type, origin, destination, days_of_week,
                    departure_time, notes='', vehicle_model=None, available_seats=None):
        """
        Insert a new ride post

        Args:
            user: CarpoolUser posting the ride
            post_type: 'offer' or 'request'
            origin: Location the ride starts from
            destination: Location the ride goes to
            days_of_week: Weekday names in week order
            departure_time: datetime.time
            notes: Free text
            vehicle_model: Optional, at most 100 characters
            available_seats: Optional, 1 to 10 inclusive

        Field values are expected to have passed RideCreateSerializer.

        Returns:
            RidePost with interest_count and location names
        """
        ride = RidePost.objects.create(
            user=user,
            post_type=post_type,
            origin=origin,
            destination=destination,
            days_of_week=days_of_week,
            departure_time=departure_time,
            notes=notes,
            vehicle_model=vehicle_model,
            available_seats=available_seats,
        )
        logger.info(f'[RIDES] Created {post_type} ride {ride.post_id} for user {user.pk}')
        return self.get_ride(ride.post_id)

    def list_active_rides(self):
        return list(RidePost.objects.active_rides())

    def get_ride(self, ride_id):
        """Return a ride by ID whether it is active or not"""
        ride = RidePost.objects.with_details().filter(pk=ride_id).first()
        if ride is None:
            raise NotFoundError("Ride not found")
        return ride

    def update_ride(self, ride_id, days_of_week, departure_time, notes):
        """Update schedule and notes of an active ride"""
        updated = RidePost.objects.filter(pk=ride_id, is_active=True).update(
            days_of_week=days_of_week,
            departure_time=departure_time,
            notes=notes,
            updated_at=timezone.now(),
        )
        if not updated:
            raise NotFoundError("Ride not found or already inactive")

        logger.info(f'[RIDES] Updated ride {ride_id}')
        return self.get_ride(ride_id)

    def deactivate_ride(self, ride_id):
        """Soft delete; calling it on an inactive ride succeeds again"""
        if not RidePost.objects.filter(pk=ride_id).update(is_active=False):
            raise NotFoundError("Ride not found")

        logger.info(f'[RIDES] Deactivated ride {ride_id}')
