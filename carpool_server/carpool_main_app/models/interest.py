"""Interest models"""
from django.db import models
from django.db.models.functions import Lower

from ..utils.constants import ContactMethod, BusinessRules


class RideInterest(models.Model):
    interest_id = models.BigAutoField(primary_key=True)
    ride = models.ForeignKey('RidePost', on_delete=models.CASCADE, related_name='interests')
    interested_name = models.CharField(max_length=BusinessRules.NAME_MAX_LENGTH)
    contact_method = models.CharField(max_length=20, choices=ContactMethod.CHOICES)
    contact_info = models.CharField(max_length=BusinessRules.CONTACT_INFO_MAX_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'ride_interests'
        ordering = ['-created_at']
        constraints = [
            # One interest per person per ride, enforced by the database
            models.UniqueConstraint('ride', Lower('interested_name'), name='unique_ride_interest_ci'),
        ]

    def __str__(self):
        return f"{self.interested_name} → ride {self.ride_id}"
