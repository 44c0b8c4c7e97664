from django.core.management.base import BaseCommand

from catalog.models import Category
from catalog.services.slugs import slugify_name

# (name, icon); names line up with the bundled feed category keyword table.
CATEGORIES = [
    ("Graphics Cards", "gpu"),
    ("Processors", "cpu"),
    ("Motherboards", "circuit-board"),
    ("Memory", "memory-stick"),
    ("Storage", "hard-drive"),
    ("Cooling", "fan"),
    ("Cases", "box"),
    ("Peripherals", "keyboard"),
]


class Command(BaseCommand):
    help = "Seed the canonical PC component categories"

    def handle(self, *args, **options):
        self.stdout.write(self.style.WARNING("Seeding categories..."))

        created_count = 0
        for name, icon in CATEGORIES:
            _, created = Category.objects.get_or_create(
                slug=slugify_name(name),
                defaults={"name": name, "icon": icon},
            )
            if created:
                created_count += 1

        self.stdout.write(
            self.style.SUCCESS(
                f"✅ Categories seeded ({created_count} created, {len(CATEGORIES) - created_count} existing)."
            )
        )
