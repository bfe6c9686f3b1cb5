"""Location-related models"""
from django.db import models
from django.db.models.functions import Lower

from ..utils.constants import LocationType, BusinessRules


class Location(models.Model):
    location_id = models.BigAutoField(primary_key=True)
    location_name = models.CharField(max_length=BusinessRules.NAME_MAX_LENGTH)
    location_type = models.CharField(max_length=20, choices=LocationType.CHOICES, default=LocationType.DEFAULT)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'locations'
        ordering = ['location_name']
        constraints = [
            models.UniqueConstraint(Lower('location_name'), name='unique_location_name_ci'),
        ]

    def __str__(self):
        return f"{self.location_name} ({self.location_type})"
