from __future__ import annotations

from django.contrib.auth import get_user_model
from django.core.management.base import BaseCommand

from modules.customers.exceptions import DuplicateEmail
from modules.customers.repositories import CustomerDjangoRepository
from modules.customers.services import CustomerService

SEED_CUSTOMERS = [
    ("Man", "Turtle", "man@turtle.sea"),
    ("Ada", "Lovelace", "ada@analytical.engine"),
    ("Grace", "Hopper", "grace@cobol.dev"),
    ("Alan", "Turing", "alan@bletchley.park"),
    ("Margaret", "Hamilton", "margaret@apollo.space"),
]


class Command(BaseCommand):
    help = "Seed the database with development users and customers."

    def add_arguments(self, parser):
        parser.add_argument(
            "--no-users",
            action="store_true",
            help="Only seed customers, skip the development accounts.",
        )

    def handle(self, *args, **options):
        self.stdout.write("Seeding development data...")

        users_created = 0 if options["no_users"] else self._seed_users()
        created, skipped = self._seed_customers()

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"users={users_created}, "
                f"customers={created}, "
                f"skipped={skipped}"
            )
        )

    def _seed_users(self) -> int:
        User = get_user_model()
        created = 0
        if not User.objects.filter(username="admin").exists():
            User.objects.create_superuser("admin", password="hunter2")
            created += 1
        if not User.objects.filter(username="user").exists():
            User.objects.create_user("user", password="password")
            created += 1
        return created

    def _seed_customers(self) -> tuple[int, int]:
        service = CustomerService(repository=CustomerDjangoRepository())
        created = skipped = 0
        for first_name, last_name, email in SEED_CUSTOMERS:
            try:
                service.upsert(
                    {"first_name": first_name, "last_name": last_name, "email": email}
                )
            except DuplicateEmail:
                skipped += 1
                continue
            created += 1
        return created, skipped
