from django.core.management.base import BaseCommand

from registrations.services import reconcile_participant_counts


class Command(BaseCommand):
    help = "Recompute each camp's participant_count from its registrations."

    def add_arguments(self, parser):
        parser.add_argument(
            "--dry-run",
            action="store_true",
            help="Report drifted camps without updating them",
        )

    def handle(self, *args, **options):
        dry_run = options["dry_run"]
        drifted = reconcile_participant_counts(dry_run=dry_run)

        for camp_id, stored, actual in drifted:
            self.stdout.write(f"Camp {camp_id}: stored={stored} actual={actual}")

        if not drifted:
            self.stdout.write(self.style.SUCCESS("All participant counts are consistent."))
        elif dry_run:
            self.stdout.write(self.style.WARNING(f"{len(drifted)} camp(s) drifted (dry run, nothing changed)."))
        else:
            self.stdout.write(self.style.SUCCESS(f"Fixed {len(drifted)} camp(s)."))
