"""
Composition root: wires settings, reporter, catalog, id allocator, order store,
validator and facade into one Engine. Presentation layers build one Engine and
pass its parts around by reference.

Run the scripted lifecycle demo: python -m order_engine.main
"""
import logging
import sys
import threading
from dataclasses import dataclass, field

from order_engine.config import Settings, settings as default_settings
from order_engine.errors import InvalidTransitionError, UnsupportedPaymentMethodError
from order_engine.facade import OrderFacade
from order_engine.models import Order
from order_engine.payments import PaymentProcessor
from order_engine.product import ProductCatalog, default_catalog
from order_engine.reporting import LoggingReporter, Reporter
from order_engine.store import IdAllocator, OrderStore
from order_engine.validation import OrderValidator

logger = logging.getLogger(__name__)


@dataclass
class Engine:
    settings: Settings
    reporter: Reporter
    catalog: ProductCatalog
    ids: IdAllocator
    store: OrderStore
    validator: OrderValidator
    facade: OrderFacade = field(repr=False)

    def place_order(self, product_id: int, quantity: int, payment_method: str) -> Order | None:
        """
        Validate, charge and create an order in one call. Returns None, with the
        reason reported, when any step turns the request down. Nothing is stored unless
        every step succeeds.
        """
        product = self.catalog.get(product_id)
        if product is None:
            self.reporter.report(f"Product #{product_id} not found", "error")
            return None
        request = {"product_name": product.name, "quantity": quantity, "payment_method": payment_method}
        if not self.validator.validate(request):
            return None
        try:
            processor = PaymentProcessor(payment_method, self.reporter)
        except UnsupportedPaymentMethodError as e:
            self.reporter.report(str(e), "error")
            return None
        processor.process(product.price * quantity)
        return self.facade.create_order(product, quantity, payment_method, self.ids.next_id())


def build_engine(
    settings: Settings | None = None,
    reporter: Reporter | None = None,
    catalog: ProductCatalog | None = None,
) -> Engine:
    cfg = settings or default_settings
    reporter = reporter or LoggingReporter()
    store = OrderStore()
    return Engine(
        settings=cfg,
        reporter=reporter,
        catalog=catalog if catalog is not None else default_catalog(),
        ids=IdAllocator(),
        store=store,
        validator=OrderValidator(reporter, settings=cfg),
        facade=OrderFacade(reporter, store=store, settings=cfg),
    )


def _start_metrics_server(port: int) -> None:
    from prometheus_client import start_http_server
    start_http_server(port)


def run_demo(engine: Engine) -> None:
    facade = engine.facade
    delivered = engine.place_order(1, 2, "credit")
    cancelled = engine.place_order(3, 1, "PayPal")
    engine.place_order(2, 0, "bank")  # rejected: quantity

    if delivered is not None:
        facade.process_order(delivered)
        facade.ship_order(delivered)
        facade.deliver_order(delivered)
        try:
            facade.process_order(delivered)
        except InvalidTransitionError as e:
            logger.info("Expected rejection: %s", e)
    if cancelled is not None:
        facade.cancel_order(cancelled)

    summary = engine.store.summary()
    logger.info(
        "Orders=%d delivered=%d cancelled=%d revenue=%.2f",
        summary.total_orders,
        summary.delivered_orders,
        summary.cancelled_orders,
        summary.total_revenue,
    )


def main() -> None:
    engine = build_engine()
    logging.basicConfig(
        level=engine.settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(message)s",
        stream=sys.stdout,
    )
    if engine.settings.metrics_port:
        threading.Thread(target=_start_metrics_server, args=(engine.settings.metrics_port,), daemon=True).start()
        logger.info("Metrics server listening on port %s", engine.settings.metrics_port)
    run_demo(engine)


if __name__ == "__main__":
    main()
