"""User-related models"""
from django.db import models

from ..utils.constants import BusinessRules


class CarpoolUser(models.Model):
    """Contact snapshot of whoever posted a ride; not an account"""
    user_id = models.BigAutoField(primary_key=True)
    name = models.CharField(max_length=BusinessRules.NAME_MAX_LENGTH)
    contact_method = models.CharField(max_length=BusinessRules.NAME_MAX_LENGTH)
    contact_info = models.CharField(max_length=BusinessRules.CONTACT_INFO_MAX_LENGTH)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'users'

    def __str__(self):
        return f"{self.name} - {self.contact_method}: {self.contact_info}"
