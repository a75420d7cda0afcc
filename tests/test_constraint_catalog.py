import threading

import pytest

from semnetkg.caseframe.engine.constraint_catalog import STANDARD_CONSTRAINTS, ConstraintCatalog
from semnetkg.caseframe.model.errors import BootstrapError, UninitializedConstraintCatalogError
from semnetkg.caseframe.model.outcome import Outcome
from semnetkg.caseframe.model.relation import Relation


def test_reading_before_initialize_fails_loudly():
    catalog = ConstraintCatalog()
    assert not catalog.initialized
    with pytest.raises(UninitializedConstraintCatalogError) as exc:
        catalog.get("andAnt")
    assert exc.value.outcome is Outcome.UNINITIALIZED_CATALOG
    assert exc.value.outcome.is_fatal
    with pytest.raises(UninitializedConstraintCatalogError):
        catalog["cq"]


def test_names_are_known_before_initialize():
    catalog = ConstraintCatalog()
    assert "withsome" in catalog
    assert "obj10" in catalog
    assert "obj11" not in catalog
    assert len(catalog) == len(STANDARD_CONSTRAINTS)


def test_initialize_is_idempotent():
    catalog = ConstraintCatalog()
    assert catalog.initialize() is True
    first = catalog.get("andAnt")
    assert catalog.initialize() is False
    assert catalog.get("andAnt") is first
    assert catalog.initialized


def test_initialize_once_under_concurrency():
    catalog = ConstraintCatalog()
    results = []
    threads = [threading.Thread(target=lambda: results.append(catalog.initialize())) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert results.count(True) == 1


def test_standard_constraints_cover_every_relation(catalog):
    for name in catalog.names():
        constraint = catalog.get(name)
        assert constraint.relation.name == name
    assert catalog.get("andAnt").adjustable is True
    assert catalog.get("min").adjustable is False
    assert catalog.get("action").limit == 1


def test_require_returns_in_requested_order(catalog):
    constraints = catalog.require("cq", "andAnt")
    assert [c.name for c in constraints] == ["cq", "andAnt"]


def test_unknown_name_is_key_error(catalog):
    with pytest.raises(KeyError):
        catalog.get("nope")


def test_relation_factory_supplies_relations():
    relations = {}

    def factory(name, rel_type):
        relations[name] = Relation(name, rel_type)
        return relations[name]

    catalog = ConstraintCatalog()
    catalog.initialize(factory)
    assert catalog.get("cq").relation is relations["cq"]
    assert catalog.get("cq").relation.type == "Proposition"


def test_failed_initialize_raises_bootstrap_error_and_stays_uninitialized():
    def broken(name, rel_type):
        if name == "arg":
            raise RuntimeError("relation store unavailable")
        return Relation(name, rel_type)

    catalog = ConstraintCatalog()
    with pytest.raises(BootstrapError) as exc:
        catalog.initialize(broken)
    assert isinstance(exc.value.__cause__, RuntimeError)
    assert not catalog.initialized
    assert catalog.initialize() is True


def test_factory_returning_wrong_relation_fails():
    catalog = ConstraintCatalog()
    with pytest.raises(BootstrapError):
        catalog.initialize(lambda name, rel_type: Relation("other"))
