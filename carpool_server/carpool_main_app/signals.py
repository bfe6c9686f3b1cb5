from django.db.backends.signals import connection_created
from django.dispatch import receiver
import logging

logger = logging.getLogger(__name__)


@receiver(connection_created)
def log_new_connection(sender, connection, **kwargs):
    """Log every physical connection the storage layer opens"""
    logger.info(f'[DB] Connected to {connection.vendor} database "{connection.settings_dict["NAME"]}"')
