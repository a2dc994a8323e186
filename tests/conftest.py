"""Shared test fixtures."""

from dataclasses import dataclass, field
from pathlib import Path

import pytest

from salad_catalog.adapters.text_file_storage import TextFileStorage
from salad_catalog.config import Settings
from salad_catalog.containers import AppContainer, build_container
from salad_catalog.domain.products import (
    Dressing,
    FruitingVegetable,
    LeafyVegetable,
    RootVegetable,
    Topping,
    TuberVegetable,
)
from salad_catalog.errors import StorageError
from salad_catalog.services.catalog import ProductCatalog
from salad_catalog.services.diagnostics import DiagnosticSink, Severity
from salad_catalog.services.salad_store import SaladStore


@dataclass
class RecordingDiagnosticSink(DiagnosticSink):
    """Diagnostic sink that keeps every report for assertions."""

    reports: list[tuple[Severity, str]] = field(default_factory=list)

    def report(self, severity: Severity, message: str) -> None:
        self.reports.append((severity, message))


@dataclass
class FlakyStorage(TextFileStorage):
    """File storage that fails reads, writes or deletes of chosen paths."""

    failing_reads: set[Path] = field(default_factory=set)
    failing_writes: set[Path] = field(default_factory=set)
    failing_deletes: set[Path] = field(default_factory=set)

    def read_lines(self, path: Path) -> list[str] | None:
        if path in self.failing_reads:
            raise StorageError("read", str(path), PermissionError("denied"))
        return super().read_lines(path)

    def write_lines(self, path: Path, lines: list[str]) -> None:
        if path in self.failing_writes:
            raise StorageError("write", str(path), OSError("disk full"))
        super().write_lines(path, lines)

    def delete(self, path: Path) -> bool:
        if path in self.failing_deletes:
            raise StorageError("delete", str(path), PermissionError("denied"))
        return super().delete(path)


SAMPLE_PRODUCTS = [
    RootVegetable("Carrot", 41.0, 4.7, True),
    LeafyVegetable("Spinach", 23.0, 2.2),
    FruitingVegetable("Tomato", 18.0, 94.5),
    TuberVegetable("Potato", 77.0, 15.0),
    Dressing("Olive Oil", 884.0, "Oil"),
    Topping("Croutons", 407.0, True),
]


@pytest.fixture
def sink() -> RecordingDiagnosticSink:
    return RecordingDiagnosticSink()


@pytest.fixture
def storage() -> FlakyStorage:
    return FlakyStorage()


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    return tmp_path / "products.txt"


@pytest.fixture
def recipes_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "salads"
    directory.mkdir()
    return directory


@pytest.fixture
def catalog(
    catalog_path: Path, storage: FlakyStorage, sink: RecordingDiagnosticSink
) -> ProductCatalog:
    return ProductCatalog(path=catalog_path, storage=storage, diagnostics=sink)


@pytest.fixture
def stocked_catalog(catalog: ProductCatalog) -> ProductCatalog:
    for product in SAMPLE_PRODUCTS:
        catalog.add(product)
    return catalog


@pytest.fixture
def salad_store(
    recipes_dir: Path,
    stocked_catalog: ProductCatalog,
    storage: FlakyStorage,
    sink: RecordingDiagnosticSink,
) -> SaladStore:
    return SaladStore(
        directory=recipes_dir,
        catalog=stocked_catalog,
        storage=storage,
        diagnostics=sink,
    )


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    return Settings(data_dir=tmp_path / "data")


@pytest.fixture
def container(
    settings: Settings, storage: FlakyStorage, sink: RecordingDiagnosticSink
) -> AppContainer:
    return build_container(settings, storage=storage, diagnostics=sink)
