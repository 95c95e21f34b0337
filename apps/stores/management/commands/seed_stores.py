"""
Management command to create the default chain stores.

Usage:
    python manage.py seed_stores

Safe to run repeatedly; existing stores are left untouched.
"""

from django.core.management.base import BaseCommand

from apps.stores.services import seed_default_stores, DEFAULT_STORES


class Command(BaseCommand):
    help = 'Create the default chain stores (Kroger, Walmart, Target, Whole Foods, Publix)'

    def handle(self, *args, **options):
        created = seed_default_stores()
        skipped = len(DEFAULT_STORES) - created

        self.stdout.write(self.style.SUCCESS(
            f'Created {created} store(s), {skipped} already present.'
        ))
