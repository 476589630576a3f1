"""Prune rotated log files."""

from django.core.management.base import BaseCommand

from core.logging import cleanup_old_logs


class Command(BaseCommand):
    """Delete rotated log files older than the retention period."""

    help = "Delete rotated log files older than --retention-days"

    def add_arguments(self, parser):
        """Register command line options."""
        parser.add_argument("--retention-days", type=int, default=10)
        parser.add_argument(
            "--log-file",
            default=None,
            help="Active log file (defaults to LOG_FILE_PATH)",
        )

    def handle(self, *_args, **options):
        """Run the cleanup and report how many files were removed."""
        deleted = cleanup_old_logs(
            log_file_path=options["log_file"],
            retention_days=options["retention_days"],
        )
        self.stdout.write(self.style.SUCCESS(f"Deleted {deleted} old log file(s)"))
