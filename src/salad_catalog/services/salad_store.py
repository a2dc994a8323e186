"""Salad recipes stored as one text file per salad."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from salad_catalog.adapters.text_codec import (
    MalformedRecord,
    decode_ingredient,
    encode_ingredient,
)
from salad_catalog.domain.salads import LoadSummary, Salad, SaladIngredient
from salad_catalog.errors import InvalidInputError, StorageError
from salad_catalog.services.catalog import ProductCatalog
from salad_catalog.services.diagnostics import DiagnosticSink, Severity
from salad_catalog.services.storage import LineStorage

_logger = logging.getLogger(__name__)

_PATH_SEPARATORS = ("/", "\\", "\0")


@dataclass
class SaladStore:
    """Recipe directory with an in-memory cache of the loaded salads.

    Ingredient product names are resolved against the catalog once, at load
    time; afterwards ingredients keep the resolved product.
    """

    directory: Path
    catalog: ProductCatalog
    storage: LineStorage
    diagnostics: DiagnosticSink
    suffix: str = ".txt"
    _salads: list[Salad] = field(default_factory=list, init=False)

    def recipe_path(self, name: str) -> Path:
        """Return the file path of a recipe, using the name exactly as stored.

        Raises InvalidInputError when the name would leave the directory.
        """
        if not name or name in {".", ".."} or any(
            separator in name for separator in _PATH_SEPARATORS
        ):
            raise InvalidInputError(f"Salad name {name!r} cannot name a recipe file")
        return self.directory / f"{name}{self.suffix}"

    def load_all(self) -> LoadSummary:
        """Replace the cache with every recipe file in the directory."""
        self._salads = []
        try:
            paths = self.storage.list_files(self.directory, self.suffix)
        except StorageError as exc:
            self.diagnostics.report(Severity.ERROR, f"Recipe listing failed: {exc}")
            return LoadSummary(loaded=0, skipped=0)

        skipped = 0
        for path in paths:
            salad = self._load_file(path)
            if salad is None:
                skipped += 1
                continue
            self._salads.append(salad)
        _logger.info(
            "Recipes loaded from %s: salads=%s skipped=%s",
            self.directory,
            len(self._salads),
            skipped,
        )
        return LoadSummary(loaded=len(self._salads), skipped=skipped)

    def _load_file(self, path: Path) -> Salad | None:
        name = path.name[: -len(self.suffix)] if self.suffix else path.name
        try:
            lines = self.storage.read_lines(path)
        except StorageError as exc:
            self.diagnostics.report(Severity.ERROR, f"Recipe {name!r} skipped: {exc}")
            return None
        salad = Salad(name=name)
        for number, line in enumerate(lines or [], start=1):
            if not line.strip():
                continue
            decoded = decode_ingredient(line)
            if isinstance(decoded, MalformedRecord):
                self.diagnostics.report(
                    Severity.WARNING,
                    f"Skipped line {number} of recipe {name!r} "
                    f"({decoded.reason}): {line!r}",
                )
                continue
            product = self.catalog.find_by_name(decoded.product_name)
            if product is None:
                self.diagnostics.report(
                    Severity.ERROR,
                    f"Product {decoded.product_name!r} not found in catalog, "
                    f"ingredient dropped from {name!r}",
                )
                continue
            salad.add_ingredient(SaladIngredient(product, decoded.weight_grams))
        return salad

    def save(self, salad: Salad) -> bool:
        """Overwrite the salad's recipe file and refresh its cache entry."""
        lines = [encode_ingredient(ingredient) for ingredient in salad.ingredients]
        try:
            self.storage.write_lines(self.recipe_path(salad.name), lines)
        except (InvalidInputError, StorageError) as exc:
            self.diagnostics.report(
                Severity.ERROR, f"Recipe {salad.name!r} save failed: {exc}"
            )
            return False
        self._drop_cached(salad.name)
        self._salads.append(salad)
        _logger.info("Recipe %r saved: ingredients=%s", salad.name, len(lines))
        return True

    def delete(self, name: str) -> bool:
        """Delete a recipe file and its cache entry; missing recipes are fine."""
        cached = self.find_by_name(name)
        try:
            existed = self.storage.delete(
                self.recipe_path(cached.name if cached else name)
            )
        except (InvalidInputError, StorageError) as exc:
            self.diagnostics.report(
                Severity.ERROR, f"Recipe {name!r} delete failed: {exc}"
            )
            return False
        self._drop_cached(name)
        _logger.info("Recipe %r deleted: file_existed=%s", name, existed)
        return True

    def find_by_name(self, name: str) -> Salad | None:
        """Return the cached salad whose name matches, ignoring case."""
        wanted = name.casefold()
        for salad in self._salads:
            if salad.name.casefold() == wanted:
                return salad
        return None

    def all_salads(self) -> list[Salad]:
        """Return a copy of the cached salad list."""
        return list(self._salads)

    def _drop_cached(self, name: str) -> None:
        wanted = name.casefold()
        self._salads = [s for s in self._salads if s.name.casefold() != wanted]
