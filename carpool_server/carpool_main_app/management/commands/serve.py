"""Management command to run the board on the configured PORT"""
import logging
import signal
import sys

from django.conf import settings
from django.core.management import call_command
from django.core.management.base import BaseCommand
from django.db import connections

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    help = 'Serve the carpool board on 0.0.0.0:$PORT and close database connections on shutdown'

    def add_arguments(self, parser):
        parser.add_argument('--port', type=int, default=settings.PORT, help=f'Port to listen on (default: {settings.PORT})')

    def handle(self, *args, **options):
        port = options['port']

        def shutdown(signum, frame):
            logger.info(f'[SERVER] Received signal {signum}, closing database connections')
            connections.close_all()
            sys.exit(0)

        signal.signal(signal.SIGTERM, shutdown)
        signal.signal(signal.SIGINT, shutdown)

        logger.info(f'[SERVER] Server running on http://localhost:{port}')
        logger.info(f'[SERVER] API available at http://localhost:{port}/api/rides')
        call_command('runserver', f'0.0.0.0:{port}', use_reloader=False)
