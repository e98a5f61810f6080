from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand, CommandError
from django.db import DEFAULT_DB_ALIAS

from listings.seed import seed_listings


class Command(BaseCommand):
    help = "Fills the database with sample listings (replaces existing listings by default)."

    def add_arguments(self, parser):
        parser.add_argument(
            "--owner-email",
            default=None,
            help="Email of the user who will own the sample listings (default: no owner).",
        )
        parser.add_argument(
            "--keep-existing",
            action="store_true",
            help="Do not delete existing listings, only add missing samples.",
        )
        parser.add_argument(
            "--database",
            default=DEFAULT_DB_ALIAS,
            help="Database alias to seed (default 'default').",
        )

    def handle(self, *args, **options):
        using = options["database"]
        owner = None
        email = options["owner_email"]
        if email:
            User = get_user_model()
            try:
                owner = User.objects.using(using).get(email__iexact=email)
            except User.DoesNotExist:
                raise CommandError(f"User with email {email} does not exist.")

        inserted = seed_listings(owner=owner, using=using, reset=not options["keep_existing"])
        self.stdout.write(self.style.SUCCESS(f"Done. Inserted {inserted} listings."))
