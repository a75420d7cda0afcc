import logging
from pathlib import Path

import pytest
import yaml

from semnetkg.caseframe.engine.catalog import PACKAGE_LOGGER, apply_log_level
from semnetkg.caseframe.engine.config import DEFAULT_CONFIG, Config, config as shared_config
from semnetkg.caseframe.engine.context import CaseFrameContext
from semnetkg.caseframe.engine.frame_registry import InMemoryFrameRegistry
from semnetkg.caseframe.model.errors import BootstrapError
from semnetkg.caseframe.model.outcome import Outcome
from semnetkg.caseframe.model.signature import CaseFrameSignature

PROJECT_CONFIG = Path(__file__).parent.parent / "config" / "caseframes.yaml"


def test_defaults():
    cfg = Config()
    assert cfg.get_log_level() == "INFO"
    assert cfg.is_strict_priority() is True
    assert cfg.get_semantic_classes() == {
        "proposition": "Proposition", "act": "Act", "control_action": "ControlAction"
    }
    assert cfg.get("missing.path", 3) == 3


def test_shared_instance():
    assert Config.get_instance() is shared_config


def test_set_does_not_touch_defaults():
    cfg = Config()
    cfg.set("signatures.strict_priority", False)
    assert cfg.is_strict_priority() is False
    assert DEFAULT_CONFIG["signatures"]["strict_priority"] is True
    assert Config().is_strict_priority() is True


def test_load_merges_with_defaults(tmp_path):
    path = tmp_path / "frames.yaml"
    path.write_text(yaml.dump({"logging": {"level": "debug"}, "signatures": {"strict_priority": False}}))
    cfg = Config()
    cfg.load_from_file(str(path))
    assert cfg.get_log_level() == "DEBUG"
    assert cfg.is_strict_priority() is False
    assert cfg.get_semantic_classes()["act"] == "Act"


def test_load_missing_file_keeps_defaults(tmp_path):
    cfg = Config()
    cfg.load_from_file(str(tmp_path / "absent.yaml"))
    assert cfg.is_strict_priority() is True


def test_load_rejects_non_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- a\n- b\n")
    with pytest.raises(ValueError):
        Config().load_from_file(str(path))


def test_save_round_trip(tmp_path):
    path = tmp_path / "saved.yaml"
    cfg = Config({"catalog": {"semantic_classes": {"control_action": "Control"}}})
    cfg.save(str(path))
    loaded = Config()
    loaded.load_from_file(str(path))
    assert loaded.get_semantic_classes()["control_action"] == "Control"


def test_project_config_file_loads():
    ctx = CaseFrameContext.from_config_file(str(PROJECT_CONFIG))
    assert ctx.strict_priority is True
    assert ctx.config.get_semantic_classes()["proposition"] == "Proposition"


def test_context_requires_bootstrap():
    ctx = CaseFrameContext()
    assert not ctx.bootstrapped
    with pytest.raises(BootstrapError) as exc:
        ctx.standard_frames
    assert exc.value.outcome is Outcome.BOOTSTRAP_FAILURE


def test_context_bootstrap_is_repeatable():
    ctx = CaseFrameContext()
    first = ctx.bootstrap()
    second = ctx.bootstrap()
    assert ctx.bootstrapped
    assert ctx.standard_frames is second
    assert second.when_do is first.when_do
    assert len(ctx.registry) == 23
    assert ctx.catalog.initialized


def test_contexts_are_independent():
    a, b = CaseFrameContext(), CaseFrameContext()
    fa, fb = a.bootstrap(), b.bootstrap()
    assert fa.and_rule == fb.and_rule
    assert fa.and_rule is not fb.and_rule
    fa.and_rule.add_signature(CaseFrameSignature("only-in-a"))
    assert "only-in-a" not in fb.and_rule.signatures


def test_context_uses_given_registry():
    registry = InMemoryFrameRegistry(Config())
    ctx = CaseFrameContext(registry=registry)
    frames = ctx.bootstrap()
    assert registry.get(frames.plan_goal.id) is frames.plan_goal


@pytest.fixture
def restore_log_levels(monkeypatch):
    monkeypatch.delenv("SEMNET_LOG_LEVEL", raising=False)
    names = (PACKAGE_LOGGER, "semnetkg.caseframe.engine.catalog")
    saved = {name: logging.getLogger(name).level for name in names}
    yield
    for name, level in saved.items():
        logging.getLogger(name).setLevel(level)


def test_context_applies_configured_log_level(restore_log_levels):
    CaseFrameContext(config=Config({"logging": {"level": "DEBUG"}})).bootstrap()
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.DEBUG
    assert logging.getLogger("semnetkg.caseframe.engine.catalog").level == logging.DEBUG
    assert logging.getLogger("semnetkg.caseframe.engine.frame_registry").getEffectiveLevel() == logging.DEBUG

    CaseFrameContext(config=Config({"logging": {"level": "warning"}}))
    assert logging.getLogger("semnetkg.caseframe.engine.catalog").level == logging.WARNING


def test_environment_log_level_wins_over_config(restore_log_levels, monkeypatch):
    monkeypatch.setenv("SEMNET_LOG_LEVEL", "ERROR")
    CaseFrameContext(config=Config({"logging": {"level": "DEBUG"}}))
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.ERROR


def test_unknown_log_level_falls_back_to_info(restore_log_levels):
    assert apply_log_level("chatty") == logging.INFO
    assert logging.getLogger(PACKAGE_LOGGER).level == logging.INFO
