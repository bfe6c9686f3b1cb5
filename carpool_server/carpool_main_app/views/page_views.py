"""Server-rendered pages"""
import logging

from django.db import DatabaseError
from django.shortcuts import render

from ..services import RideService

logger = logging.getLogger(__name__)


def index(request):
    """Board of active rides"""
    try:
        rides = RideService().list_active_rides()
        error = None
    except DatabaseError:
        logger.exception('[RIDES] Failed to load rides for the board')
        rides, error = [], 'Rides could not be loaded right now. Please try again later.'

    return render(request, 'carpool_main_app/index.html', {
        'rides': rides,
        'error': error,
    }, status=500 if error else 200)
