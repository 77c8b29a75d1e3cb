from __future__ import annotations

import random
from datetime import timedelta
from decimal import Decimal

from django.core.cache import cache
from django.core.management.base import BaseCommand
from django.db import transaction
from django.utils import timezone

from modules.customers.models import Customer
from modules.orders.constants import OrderStatus
from modules.orders.models import Order, OrderItem
from modules.pastries.models import Pastry
from modules.pastries.services import PASTRY_LIST_CACHE_KEY


class Command(BaseCommand):
    help = "Seed database with sample pastries, customers and orders."

    def add_arguments(self, parser):
        parser.add_argument(
            "--orders",
            type=int,
            default=20,
            help="Number of sample orders to create when none exist yet.",
        )

    @transaction.atomic
    def handle(self, *args, **options):
        random.seed(42)
        self.stdout.write("Seeding development data...")

        pastries = self._seed_pastries()
        customers = self._seed_customers()
        orders_created = self._seed_orders(customers, pastries, options["orders"])
        cache.delete(PASTRY_LIST_CACHE_KEY)

        self.stdout.write(
            self.style.SUCCESS(
                "Seed completed: "
                f"pastries={len(pastries)}, "
                f"customers={len(customers)}, "
                f"orders={orders_created}"
            )
        )

    def _seed_pastries(self) -> list[Pastry]:
        self.stdout.write("Creating pastries...")
        catalog = [
            ("Kyiv Cake", Decimal("420.00")),
            ("Napoleon", Decimal("380.00")),
            ("Honey Cake", Decimal("350.00")),
            ("Eclair", Decimal("45.00")),
            ("Croissant", Decimal("38.50")),
            ("Cheesecake", Decimal("95.00")),
            ("Macaron", Decimal("30.00")),
            ("Tiramisu", Decimal("110.00")),
            ("Poppy Seed Roll", Decimal("160.00")),
            ("Pampushka", Decimal("15.00")),
        ]
        pastries: list[Pastry] = []
        for name, price in catalog:
            pastry, _ = Pastry.objects.get_or_create(
                name=name, defaults={"price": price}
            )
            pastries.append(pastry)
        self.stdout.write(self.style.SUCCESS("Creating pastries... Done!"))
        return pastries

    def _seed_customers(self) -> list[Customer]:
        self.stdout.write("Creating customers...")
        seed_customers = [
            ("Olena Kovalenko", "+380501234567"),
            ("Taras Shevchuk", "+380671112233"),
            ("Iryna Bondar", "+380931234321"),
            ("Andrii Melnyk", "+380661239876"),
            ("Sofiia Tkachenko", "+380731110099"),
            ("Maksym Kravets", "+380952223344"),
        ]
        customers: list[Customer] = []
        for name, phone in seed_customers:
            customer, _ = Customer.objects.get_or_create(
                phone=phone, defaults={"name": name}
            )
            customers.append(customer)
        self.stdout.write(self.style.SUCCESS("Creating customers... Done!"))
        return customers

    def _seed_orders(
        self, customers: list[Customer], pastries: list[Pastry], count: int
    ) -> int:
        self.stdout.write("Creating orders...")
        if Order.objects.exists():
            self.stdout.write(self.style.WARNING("Skipping orders (already seeded)."))
            return 0

        statuses = list(OrderStatus)
        weights = [0.35, 0.25, 0.25, 0.15]

        for _ in range(count):
            order = Order.objects.create(
                customer=random.choice(customers),
                status=random.choices(statuses, weights=weights, k=1)[0],
                order_time=timezone.now() - timedelta(days=random.randint(0, 30)),
            )
            OrderItem.objects.bulk_create(
                OrderItem(order=order, pastry=pastry, quantity=random.randint(1, 6))
                for pastry in random.sample(pastries, k=random.randint(1, 4))
            )

        self.stdout.write(self.style.SUCCESS("Creating orders... Done!"))
        return count
