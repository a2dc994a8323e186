"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from salad_catalog.adapters.text_file_storage import TextFileStorage
from salad_catalog.config import Settings
from salad_catalog.errors import StorageError
from salad_catalog.services.catalog import ProductCatalog
from salad_catalog.services.diagnostics import (
    DiagnosticSink,
    LoggingDiagnosticSink,
    Severity,
)
from salad_catalog.services.products import CatalogService
from salad_catalog.services.salad_store import SaladStore
from salad_catalog.services.salads import SaladService
from salad_catalog.services.storage import LineStorage

_logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    diagnostics: DiagnosticSink
    catalog: ProductCatalog
    salad_store: SaladStore
    catalog_service: CatalogService
    salad_service: SaladService


def build_container(
    settings: Settings | None = None,
    storage: LineStorage | None = None,
    diagnostics: DiagnosticSink | None = None,
) -> AppContainer:
    """Create the default container and load the catalog and recipes."""
    resolved_settings = settings or Settings()
    resolved_storage = storage or TextFileStorage()
    sink = diagnostics or LoggingDiagnosticSink()

    for directory in (
        resolved_settings.catalog_path.parent,
        resolved_settings.recipes_dir,
    ):
        try:
            resolved_storage.ensure_directory(directory)
        except StorageError as exc:
            sink.report(Severity.ERROR, f"Data directory unavailable: {exc}")

    catalog = ProductCatalog(
        path=resolved_settings.catalog_path,
        storage=resolved_storage,
        diagnostics=sink,
    )
    salad_store = SaladStore(
        directory=resolved_settings.recipes_dir,
        catalog=catalog,
        storage=resolved_storage,
        diagnostics=sink,
        suffix=resolved_settings.recipe_suffix,
    )
    catalog.load()
    salad_store.load_all()
    _logger.info(
        "Container ready: products=%s salads=%s",
        len(catalog.all()),
        len(salad_store.all_salads()),
    )

    return AppContainer(
        settings=resolved_settings,
        diagnostics=sink,
        catalog=catalog,
        salad_store=salad_store,
        catalog_service=CatalogService(catalog),
        salad_service=SaladService(store=salad_store, catalog=catalog),
    )
