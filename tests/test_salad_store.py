"""Tests for the recipe directory store."""

from salad_catalog.domain.salads import LoadSummary, Salad, SaladIngredient
from salad_catalog.services.diagnostics import Severity
from salad_catalog.services.salad_store import SaladStore


def _write_recipe(recipes_dir, name: str, *lines: str) -> None:
    (recipes_dir / f"{name}.txt").write_text(
        "".join(f"{line}\n" for line in lines), encoding="utf-8"
    )


def test_load_all_resolves_ingredients(salad_store, recipes_dir, sink) -> None:
    _write_recipe(recipes_dir, "Greek", "tomato;150.0", "Croutons;30,5")
    (recipes_dir / "notes.md").write_text("not a recipe", encoding="utf-8")

    summary = salad_store.load_all()

    assert summary == LoadSummary(loaded=1, skipped=0)
    salad = salad_store.find_by_name("greek")
    assert salad is not None
    assert salad.name == "Greek"
    assert [(i.product.name, i.weight_grams) for i in salad.ingredients] == [
        ("Tomato", 150.0),
        ("Croutons", 30.5),
    ]
    assert salad.ingredients[0].product is salad_store.catalog.find_by_name("Tomato")
    assert sink.reports == []


def test_load_all_drops_bad_lines_and_unknown_products(
    salad_store, recipes_dir, sink
) -> None:
    _write_recipe(
        recipes_dir,
        "Garden",
        "Spinach;50",
        "Spinach",
        "Carrot;lots",
        "Unicorn;10",
        "Carrot;80;raw",
        "Potato;100",
    )

    salad_store.load_all()

    salad = salad_store.find_by_name("Garden")
    assert salad is not None
    assert [i.product.name for i in salad.ingredients] == ["Spinach", "Potato"]
    severities = [severity for severity, _ in sink.reports]
    assert severities.count(Severity.WARNING) == 3
    assert severities.count(Severity.ERROR) == 1
    assert "Unicorn" in sink.reports[2][1]


def test_load_all_skips_unreadable_file(
    salad_store, recipes_dir, storage, sink
) -> None:
    _write_recipe(recipes_dir, "Broken", "Spinach;50")
    _write_recipe(recipes_dir, "Fine", "Tomato;100")
    storage.failing_reads.add(recipes_dir / "Broken.txt")

    summary = salad_store.load_all()

    assert summary == LoadSummary(loaded=1, skipped=1)
    assert [salad.name for salad in salad_store.all_salads()] == ["Fine"]
    assert sink.reports[0][0] is Severity.ERROR


def test_load_all_replaces_cache(salad_store, recipes_dir) -> None:
    salad_store.save(Salad("Temporary"))
    (recipes_dir / "Temporary.txt").unlink()
    _write_recipe(recipes_dir, "Kept", "Tomato;100")

    salad_store.load_all()

    assert [salad.name for salad in salad_store.all_salads()] == ["Kept"]


def test_save_writes_file_and_replaces_cache_entry(salad_store, recipes_dir) -> None:
    tomato = salad_store.catalog.find_by_name("Tomato")
    salad_store.save(Salad("Caprese", [SaladIngredient(tomato, 200)]))
    replacement = Salad("caprese", [SaladIngredient(tomato, 250)])

    assert salad_store.save(replacement)

    assert salad_store.all_salads() == [replacement]
    assert (recipes_dir / "caprese.txt").read_text(encoding="utf-8") == (
        "Tomato;250.0\n"
    )


def test_saved_recipe_loads_back(salad_store, recipes_dir, storage, sink) -> None:
    catalog = salad_store.catalog
    salad = Salad(
        "Autumn",
        [
            SaladIngredient(catalog.find_by_name("Carrot"), 120.0),
            SaladIngredient(catalog.find_by_name("Olive Oil"), 12.5),
        ],
    )
    salad_store.save(salad)
    fresh = SaladStore(
        directory=recipes_dir, catalog=catalog, storage=storage, diagnostics=sink
    )

    fresh.load_all()

    assert fresh.all_salads() == [salad]


def test_failed_save_leaves_cache_untouched(
    salad_store, recipes_dir, storage, sink
) -> None:
    storage.failing_writes.add(recipes_dir / "Nicoise.txt")

    assert salad_store.save(Salad("Nicoise")) is False

    assert salad_store.all_salads() == []
    assert sink.reports[0][0] is Severity.ERROR


def test_delete_removes_file_and_cache_entry(salad_store, recipes_dir) -> None:
    salad_store.save(Salad("Waldorf"))

    assert salad_store.delete("WALDORF")

    assert not (recipes_dir / "Waldorf.txt").exists()
    assert salad_store.find_by_name("Waldorf") is None


def test_delete_missing_recipe_is_idempotent(salad_store, sink) -> None:
    salad_store.save(Salad("Cobb"))
    before = salad_store.all_salads()

    assert salad_store.delete("Nonexistent")
    assert salad_store.delete("Nonexistent")

    assert salad_store.all_salads() == before
    assert sink.reports == []


def test_failed_delete_keeps_cache_entry(salad_store, recipes_dir, storage) -> None:
    salad_store.save(Salad("Chef"))
    storage.failing_deletes.add(recipes_dir / "Chef.txt")

    assert salad_store.delete("Chef") is False

    assert salad_store.find_by_name("Chef") is not None


def test_all_salads_returns_a_copy(salad_store) -> None:
    salad_store.save(Salad("Cobb"))

    salad_store.all_salads().clear()

    assert len(salad_store.all_salads()) == 1


def test_recipe_with_colon_in_name_saves_and_deletes(
    salad_store, recipes_dir, sink
) -> None:
    _write_recipe(recipes_dir, "Chef: special", "Tomato;100.0")
    salad_store.load_all()
    salad = salad_store.find_by_name("Chef: special")
    assert salad is not None
    salad.add_ingredient(
        SaladIngredient(salad_store.catalog.find_by_name("Spinach"), 40.0)
    )

    assert salad_store.save(salad)
    assert (recipes_dir / "Chef: special.txt").read_text(encoding="utf-8") == (
        "Tomato;100.0\nSpinach;40.0\n"
    )

    assert salad_store.delete("Chef: special")
    assert list(recipes_dir.iterdir()) == []
    assert sink.reports == []


def test_recipe_name_keeps_leading_space(
    salad_store, recipes_dir, storage, sink
) -> None:
    _write_recipe(recipes_dir, " Greek", "Tomato;100.0")
    salad_store.load_all()
    salad = salad_store.find_by_name(" Greek")
    assert salad is not None

    assert salad_store.save(salad)

    assert [path.name for path in recipes_dir.iterdir()] == [" Greek.txt"]
    fresh = SaladStore(
        directory=recipes_dir,
        catalog=salad_store.catalog,
        storage=storage,
        diagnostics=sink,
    )
    assert fresh.load_all() == LoadSummary(loaded=1, skipped=0)
    assert [s.name for s in fresh.all_salads()] == [" Greek"]

    assert salad_store.delete(" Greek")
    assert list(recipes_dir.iterdir()) == []


def test_names_leaving_the_directory_are_reported(
    salad_store, recipes_dir, sink
) -> None:
    assert salad_store.save(Salad("../escape")) is False
    assert salad_store.delete("nested/recipe") is False

    assert salad_store.all_salads() == []
    assert list(recipes_dir.iterdir()) == []
    assert [severity for severity, _ in sink.reports] == [
        Severity.ERROR,
        Severity.ERROR,
    ]
