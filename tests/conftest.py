import pytest

from semnetkg.caseframe.engine.config import Config
from semnetkg.caseframe.engine.constraint_catalog import ConstraintCatalog
from semnetkg.caseframe.engine.frame_registry import InMemoryFrameRegistry
from semnetkg.caseframe.model.case_frame import ConstrainedCaseFrame
from semnetkg.caseframe.model.constraint import RelationConstraint
from semnetkg.caseframe.model.relation import Relation


def _constraint(name: str, adjustable: bool = False, limit: int = 1) -> RelationConstraint:
    return RelationConstraint(Relation(name), adjustable, limit)


@pytest.fixture
def make_constraint():
    return _constraint


@pytest.fixture
def config():
    return Config()


@pytest.fixture
def catalog():
    cat = ConstraintCatalog()
    cat.initialize()
    return cat


@pytest.fixture
def registry(config):
    return InMemoryFrameRegistry(config)


@pytest.fixture
def and_frame():
    return ConstrainedCaseFrame.from_constraints(
        "Proposition", [_constraint("andAnt", True), _constraint("cq", True)]
    )
