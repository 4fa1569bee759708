from __future__ import annotations

from decimal import Decimal

from django.core.management.base import BaseCommand

from modules.products.entities import Product
from modules.products.repositories import build_product_repository
from modules.products.services import ProductService
from modules.products.use_cases import ProductUseCase

SEED_PRODUCTS = [
    ("Laptop", "14-inch ultrabook, 16 GB RAM", Decimal("1299.99"), 5),
    ("Mechanical Keyboard", "Tenkeyless, brown switches", Decimal("89.90"), 25),
    ("USB-C Dock", "Dual display, 100 W passthrough", Decimal("149.00"), 12),
    ("Webcam", None, Decimal("59.50"), 40),
]


class Command(BaseCommand):
    help = "Seed the product catalogue with demo data."

    def handle(self, *args, **options):
        use_case = ProductUseCase(ProductService(repository=build_product_repository()))

        if use_case.list_products():
            self.stdout.write("Products already present, nothing to seed.")
            return

        self.stdout.write("Creating products...")
        for name, description, price, quantity in SEED_PRODUCTS:
            use_case.create_product(
                Product(
                    name=name,
                    description=description,
                    price=price,
                    quantity=quantity,
                )
            )

        self.stdout.write(
            self.style.SUCCESS(f"Seed completed: products={len(SEED_PRODUCTS)}")
        )
