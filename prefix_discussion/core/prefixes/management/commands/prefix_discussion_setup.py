"""
Django management command to install or upgrade the Prefix Discussion app.
"""
import logging

from django.core.management import CommandError
from django.core.management.base import BaseCommand

from prefix_discussion.core.prefixes import api

logger = logging.getLogger(__name__)


class Command(BaseCommand):
    """
    Seeds the prefix configuration and prepares the discussion table.

    Safe to run repeatedly: existing settings are kept, and the one-time
    backfill of empty prefixes only runs until it has succeeded once.
    """
    help = 'Set up the Prefix Discussion app: default settings, prefix column and data backfill.'

    def handle(self, *args, **options):
        try:
            api.setup()
        except Exception as e:
            logger.exception("Prefix Discussion setup failed")
            raise CommandError(f"Prefix Discussion setup failed: {e}") from e
        self.stdout.write(self.style.SUCCESS("Prefix Discussion setup complete."))
