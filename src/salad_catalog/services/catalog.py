"""Product catalog backed by a single text file."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from salad_catalog.adapters.text_codec import (
    MalformedRecord,
    decode_product,
    encode_product,
)
from salad_catalog.domain.products import Product
from salad_catalog.domain.salads import LoadSummary
from salad_catalog.errors import StorageError
from salad_catalog.services.diagnostics import DiagnosticSink, Severity
from salad_catalog.services.storage import LineStorage

_logger = logging.getLogger(__name__)


@dataclass
class ProductCatalog:
    """Ordered, in-memory product list persisted as one catalog file.

    The in-memory list is authoritative. Every mutation is followed by a full
    rewrite of the file; a failed rewrite is reported and leaves memory as is.
    """

    path: Path
    storage: LineStorage
    diagnostics: DiagnosticSink
    _products: list[Product] = field(default_factory=list, init=False)

    def load(self) -> LoadSummary:
        """Replace memory with every decodable line of the catalog file."""
        try:
            lines = self.storage.read_lines(self.path)
        except StorageError as exc:
            self.diagnostics.report(Severity.ERROR, f"Catalog load failed: {exc}")
            return LoadSummary(loaded=len(self._products), skipped=0)
        if lines is None:
            _logger.info("Catalog file %s not found, starting empty", self.path)
            self._products = []
            return LoadSummary(loaded=0, skipped=0)

        products: list[Product] = []
        skipped = 0
        for number, line in enumerate(lines, start=1):
            if not line.strip():
                continue
            decoded = decode_product(line)
            if isinstance(decoded, MalformedRecord):
                skipped += 1
                self.diagnostics.report(
                    Severity.WARNING,
                    f"Skipped catalog line {number} ({decoded.reason}): {line!r}",
                )
                continue
            products.append(decoded)
        self._products = products
        _logger.info(
            "Catalog loaded from %s: products=%s skipped=%s",
            self.path,
            len(products),
            skipped,
        )
        return LoadSummary(loaded=len(products), skipped=skipped)

    def save(self) -> bool:
        """Overwrite the catalog file with the whole in-memory list."""
        lines = [encode_product(product) for product in self._products]
        try:
            self.storage.write_lines(self.path, lines)
        except StorageError as exc:
            self.diagnostics.report(Severity.ERROR, f"Catalog save failed: {exc}")
            return False
        _logger.info("Catalog saved to %s: products=%s", self.path, len(lines))
        return True

    def add(self, product: Product) -> bool:
        """Append a product and persist; the product stays even if saving fails."""
        self._products.append(product)
        return self.save()

    def remove(self, product: Product) -> bool:
        """Remove the first equal product and persist.

        Returns False without touching the file when the product is absent.
        """
        try:
            self._products.remove(product)
        except ValueError:
            self.diagnostics.report(
                Severity.WARNING, f"Product {product.name!r} is not in the catalog"
            )
            return False
        return self.save()

    def find_by_name(self, name: str) -> Product | None:
        """Return the first product whose name matches, ignoring case."""
        wanted = name.casefold()
        for product in self._products:
            if product.name.casefold() == wanted:
                return product
        return None

    def all(self) -> list[Product]:
        """Return a copy of the product list."""
        return list(self._products)
