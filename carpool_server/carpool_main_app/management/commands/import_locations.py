# command : python manage.py import_locations ./locations.json
import json
from django.core.management.base import BaseCommand, CommandError
from carpool_main_app.serializers import LocationInputSerializer, first_error
from carpool_main_app.services import LocationService

class Command(BaseCommand):
    help = 'Load a list of locations from a JSON file into the database'

    def add_arguments(self, parser):
        parser.add_argument('json_file', type=str, help='Path to the JSON file')

    def handle(self, *args, **kwargs):
        json_file_path = kwargs['json_file']
        try:
            with open(json_file_path, 'r', encoding='utf-8') as file:
                locations = json.load(file)
        except FileNotFoundError:
            raise CommandError('File "{}" does not exist'.format(json_file_path))
        except json.JSONDecodeError:
            raise CommandError('Error decoding JSON from "{}"'.format(json_file_path))

        if not isinstance(locations, list):
            raise CommandError('Expected a JSON list of locations in "{}"'.format(json_file_path))

        service = LocationService()
        created_count = 0
        for location_data in locations:
            # Accept both {"location_name": ...} objects and bare names
            if isinstance(location_data, str):
                location_data = {'location_name': location_data}
            serializer = LocationInputSerializer(data=location_data)
            if not serializer.is_valid():
                self.stderr.write(f'Skipping {location_data!r}: {first_error(serializer.errors)}')
                continue
            _location, created = service.get_or_create(**serializer.validated_data)
            created_count += int(created)

        self.stdout.write(self.style.SUCCESS(
            f'Successfully imported locations ({created_count} new, {len(locations) - created_count} existing or skipped)'
        ))
