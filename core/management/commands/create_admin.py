"""Create or promote the shop administrator account."""

from django.core.management.base import BaseCommand, CommandError

from pydantic import ValidationError

from core.schemas.user import UserRegisterRequest
from core.services.user_service import user_service


class Command(BaseCommand):
    """Ensure an admin account exists with the given credentials.

    An existing account with the same email (or username) is promoted and
    its password reset, so the command is safe to run on every deploy.
    """

    help = "Create the admin user, or promote and reset an existing account"

    def add_arguments(self, parser):
        """Register command line options."""
        parser.add_argument("--username", required=True)
        parser.add_argument("--email", required=True)
        parser.add_argument("--password", required=True)

    def handle(self, *_args, **options):
        """Validate the credentials and write the admin account."""
        try:
            credentials = UserRegisterRequest(
                username=options["username"],
                email=options["email"],
                password=options["password"],
            )
        except ValidationError as e:
            messages = "; ".join(err["msg"] for err in e.errors())
            raise CommandError(f"Invalid admin credentials: {messages}") from e

        user, created = user_service.create_admin(
            username=credentials.username,
            email=credentials.email,
            password=credentials.password,
        )
        verb = "Created" if created else "Promoted"
        self.stdout.write(
            self.style.SUCCESS(f"{verb} admin user {user.username} <{user.email}>")
        )
