"""Ride post models"""
from django.core.validators import MinValueValidator, MaxValueValidator
from django.db import models
from django.db.models import Count, F, Q

from ..utils.constants import PostType, BusinessRules


class RidePostQuerySet(models.QuerySet):
    def with_details(self):
        """Join origin, destination and poster and count the interests per post"""
        return self.annotate(
            origin_name=F('origin__location_name'),
            origin_type=F('origin__location_type'),
            destination_name=F('destination__location_name'),
            destination_type=F('destination__location_type'),
            user_name=F('user__name'),
            contact_method=F('user__contact_method'),
            contact_info=F('user__contact_info'),
            interest_count=Count('interests'),
        )

    def active_rides(self):
        return self.with_details().filter(is_active=True).order_by('-created_at', '-post_id')


class RidePost(models.Model):
    post_id = models.BigAutoField(primary_key=True)
    user = models.ForeignKey('CarpoolUser', on_delete=models.PROTECT, related_name='ride_posts')
    post_type = models.CharField(max_length=10, choices=PostType.CHOICES)
    origin = models.ForeignKey('Location', on_delete=models.PROTECT, related_name='rides_from')
    destination = models.ForeignKey('Location', on_delete=models.PROTECT, related_name='rides_to')
    days_of_week = models.JSONField(default=list)
    departure_time = models.TimeField()
    notes = models.TextField(blank=True, default='')
    vehicle_model = models.CharField(max_length=BusinessRules.VEHICLE_MODEL_MAX_LENGTH, null=True, blank=True)
    available_seats = models.PositiveSmallIntegerField(
        null=True,
        blank=True,
        validators=[MinValueValidator(BusinessRules.MIN_SEATS), MaxValueValidator(BusinessRules.MAX_SEATS)],
    )
    is_active = models.BooleanField(default=True)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = RidePostQuerySet.as_manager()

    class Meta:
        db_table = 'ride_posts'
        indexes = [
            models.Index(fields=['is_active', 'created_at'], name='ride_posts_active_idx'),
        ]
        constraints = [
            models.CheckConstraint(
                condition=Q(available_seats__isnull=True) | Q(
                    available_seats__gte=BusinessRules.MIN_SEATS,
                    available_seats__lte=BusinessRules.MAX_SEATS,
                ),
                name='ride_available_seats_range',
            ),
        ]

    def __str__(self):
        return f"{self.get_post_type_display()}: {self.origin} → {self.destination}"
