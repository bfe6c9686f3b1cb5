"""Centralized constants and business rules"""

class LocationType:
    RESIDENTIAL = 'residential'
    COMMERCIAL = 'commercial'
    TERMINAL = 'terminal'

    DEFAULT = COMMERCIAL

    CHOICES = [
        (RESIDENTIAL, 'Residential'),
        (COMMERCIAL, 'Commercial'),
        (TERMINAL, 'Terminal'),
    ]

class PostType:
    OFFER = 'offer'
    REQUEST = 'request'

    CHOICES = [
        (OFFER, 'Offering a ride'),
        (REQUEST, 'Requesting a ride'),
    ]

class ContactMethod:
    MESSENGER = 'messenger'
    VIBER = 'viber'
    PHONE = 'phone'
    TELEGRAM = 'telegram'

    CHOICES = [
        (MESSENGER, 'Messenger'),
        (VIBER, 'Viber'),
        (PHONE, 'Phone'),
        (TELEGRAM, 'Telegram'),
    ]

class Weekday:
    ORDER = [
        'monday', 'tuesday', 'wednesday', 'thursday',
        'friday', 'saturday', 'sunday',
    ]

    ABBREVIATIONS = {day[:3]: day for day in ORDER}

class BusinessRules:
    """Field limits and ranges"""
    NAME_MAX_LENGTH = 100
    CONTACT_INFO_MAX_LENGTH = 100
    VEHICLE_MODEL_MAX_LENGTH = 100
    MIN_SEATS = 1
    MAX_SEATS = 10


def choice_values(choices):
    return [value for value, _label in choices]
