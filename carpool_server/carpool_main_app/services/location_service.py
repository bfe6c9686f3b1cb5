"""Location service - get-or-create registry of named places"""
import logging

from django.db import transaction, IntegrityError

from ..models import Location
from ..utils.constants import LocationType
from ..utils.storage import is_unique_violation

logger = logging.getLogger(__name__)


class LocationService:
    """Service for location operations"""

    def list_locations(self):
        return list(Location.objects.order_by('location_name'))

    def get_or_create(self, location_name, location_type=LocationType.DEFAULT):
        """
        Return the location matching ``location_name`` case-insensitively, creating it if needed

        Args:
            location_name: Trimmed name, as produced by LocationInputSerializer
            location_type: Type used only when a new row is created

        Returns:
            (Location, created) tuple
        """
        existing = Location.objects.filter(location_name__iexact=location_name).first()
        if existing:
            return existing, False

        try:
            with transaction.atomic():
                location = Location.objects.create(location_name=location_name, location_type=location_type)
        except IntegrityError as e:
            if not is_unique_violation(e):
                raise
            # Lost the race against a concurrent insert of the same name
            logger.info(f'[LOCATIONS] Concurrent create for "{location_name}", returning existing row')
            return Location.objects.get(location_name__iexact=location_name), False

        logger.info(f'[LOCATIONS] Created location {location.location_id}: {location.location_name}')
        return location, True
