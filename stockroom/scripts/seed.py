"""Seed the in-memory store with demo data.

The console and the web app call ``seed_demo_data`` at startup. Running this
module seeds a fresh store and prints a summary.

Usage:
    python -m stockroom.scripts.seed
"""

from __future__ import annotations

import logging
import random

from faker import Faker
from rich.console import Console
from rich.table import Table

from stockroom.logging import configure_logging
from stockroom.models import format_inr
from stockroom.models.bill import BillStatus
from stockroom.models.order import LineItem, PurchaseOrderStatus, SalesOrderStatus
from stockroom.models.supplier import SupplierStatus
from stockroom.repositories.factory import (
    get_bill_repository,
    get_product_repository,
    get_purchase_order_repository,
    get_sales_order_repository,
    get_supplier_repository,
)
from stockroom.services.bill_service import BillService
from stockroom.services.product_service import ProductService
from stockroom.services.purchase_order_service import PurchaseOrderService
from stockroom.services.sales_order_service import SalesOrderService
from stockroom.services.supplier_service import SupplierService
from stockroom.settings import settings

logger = logging.getLogger(__name__)
console = Console()

# name, sku, category, cost, selling (paise), stock, min stock
DEMO_PRODUCTS = [
    ("Widget A", "WGT-001", "Hardware", 1850, 2999, 150, 20),
    ("Gadget B", "GDG-002", "Electronics", 5200, 7999, 23, 25),
    ("Component C", "CMP-003", "Hardware", 900, 1499, 5, 10),
    ("USB-C Cable 1m", "CBL-004", "Electronics", 12000, 19900, 80, 15),
    ("Wireless Mouse", "MSE-005", "Electronics", 45000, 69900, 0, 5),
    ("A4 Paper Ream", "PPR-006", "Stationery", 21000, 28500, 40, 10),
    ("Ball Pen (Box of 10)", "PEN-007", "Stationery", 6000, 9000, 12, 12),
]


def seed_demo_data(
    product_service: ProductService,
    supplier_service: SupplierService,
    purchase_service: PurchaseOrderService,
    sales_service: SalesOrderService,
    bill_service: BillService,
    seed: int | None = None,
) -> dict[str, int]:
    """Create products, suppliers, orders and bills. Returns counts per entity."""
    seed = settings.seed_random_seed if seed is None else seed
    fake = Faker("en_IN")
    fake.seed_instance(seed)
    rng = random.Random(seed)

    products = [
        product_service.create_product(
            name=name,
            sku=sku,
            category=category,
            cost_price=cost,
            selling_price=selling,
            stock=stock,
            min_stock=min_stock,
        )
        for name, sku, category, cost, selling, stock, min_stock in DEMO_PRODUCTS
    ]

    suppliers = []
    for i in range(4):
        suppliers.append(
            supplier_service.create_supplier(
                shop_name=fake.company(),
                contact_name=fake.name(),
                email=fake.company_email(),
                phone=fake.phone_number(),
                address=fake.address().replace("\n", ", "),
                status=SupplierStatus.INACTIVE if i == 3 else SupplierStatus.ACTIVE,
            )
        )

    purchase_orders = []
    for status in (PurchaseOrderStatus.COMPLETED, PurchaseOrderStatus.COMPLETED, PurchaseOrderStatus.PENDING):
        picked = rng.sample(products, 2)
        purchase_orders.append(
            purchase_service.create_order(
                supplier_id=rng.choice(suppliers[:3]).id,
                items=[LineItem(product_id=p.id, quantity=rng.randint(5, 30)) for p in picked],
                status=status,
                tax_percent=18,
                notes=fake.sentence(nb_words=6),
            )
        )

    sales_orders = [
        sales_service.create_order(
            items=[LineItem(product_id=products[0].id, quantity=2), LineItem(product_id=products[3].id, quantity=1)],
            customer_name=fake.name(),
            status=SalesOrderStatus.COMPLETED,
            tax_percent=18,
        ),
        sales_service.create_order(
            items=[LineItem(product_id=products[5].id, quantity=3)],
            status=SalesOrderStatus.PENDING,
        ),
    ]

    completed = [po for po in purchase_orders if po.is_completed]
    bills = [
        bill_service.create_bill_for_order(completed[0].id, status=BillStatus.PAID, new_payment=completed[0].grand_total),
        bill_service.create_bill_for_order(
            completed[1].id, status=BillStatus.PARTIALLY_PAID, new_payment=completed[1].grand_total // 2
        ),
    ]

    counts = {
        "products": len(products),
        "suppliers": len(suppliers),
        "purchase_orders": len(purchase_orders),
        "sales_orders": len(sales_orders),
        "bills": len(bills),
    }
    logger.info("Demo data seeded: %s", counts)
    return counts


def build_services() -> tuple[ProductService, SupplierService, PurchaseOrderService, SalesOrderService, BillService]:
    product_repo = get_product_repository()
    supplier_repo = get_supplier_repository()
    purchase_repo = get_purchase_order_repository()
    return (
        ProductService(product_repo),
        SupplierService(supplier_repo),
        PurchaseOrderService(purchase_repo, product_repo, supplier_repo),
        SalesOrderService(get_sales_order_repository(), product_repo),
        BillService(get_bill_repository(), purchase_repo, supplier_repo),
    )


def main() -> None:
    configure_logging()
    services = build_services()
    counts = seed_demo_data(*services)

    table = Table(title="Seeded")
    table.add_column("Entity")
    table.add_column("Count", justify="right")
    for name, count in counts.items():
        table.add_row(name.replace("_", " ").title(), str(count))
    console.print(table)

    product_service = services[0]
    stock_value = sum(p.stock_value for p in product_service.list_products())
    console.print(f"  Stock value: [bold]{format_inr(stock_value)}[/bold]")


if __name__ == "__main__":
    main()
