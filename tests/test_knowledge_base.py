"""Tests for the Knowledge Base."""

import json
import logging

import pytest

from cultural_advisor.errors import PreconditionViolation
from cultural_advisor.knowledge import seed
from cultural_advisor.knowledge.base import KnowledgeBase


class TestKnowledgeBase:
    def setup_method(self):
        self.kb = KnowledgeBase.default()

    def test_default_loads_seed(self):
        assert {c.id for c in self.kb.list_cultures()} == {"GERMANY", "JAPAN", "USA"}
        assert {t.id for t in self.kb.list_templates()} == {"SCEN001", "SCEN002"}
        assert {m.id for m in self.kb.list_learning_modules()} == {"LM001", "LM003"}

    def test_get_unknown_returns_none(self):
        assert self.kb.get_culture("ATLANTIS") is None
        assert self.kb.get_template("SCEN999") is None
        assert self.kb.get_learning_module("LM999") is None

    def test_require_culture(self):
        assert self.kb.require_culture("JAPAN").name == "Japan"
        with pytest.raises(PreconditionViolation) as exc:
            self.kb.require_culture("ATLANTIS")
        assert exc.value.resource == "culture"
        assert exc.value.key == "ATLANTIS"

    def test_require_template(self):
        assert self.kb.require_template("SCEN001").objectives
        with pytest.raises(PreconditionViolation, match="scenario template"):
            self.kb.require_template("SCEN999")

    def test_duplicate_culture_rejected(self):
        with pytest.raises(ValueError, match="Duplicate culture"):
            KnowledgeBase.from_dict({
                "cultures": [seed.CULTURES[0], seed.CULTURES[0]],
                "scenario_templates": [],
            })

    def test_dangling_learning_module_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="cultural_advisor.knowledge.base"):
            KnowledgeBase.default()
        # SCEN001 references LM002, which the seed doesn't define
        assert "LM002" in caplog.text


class TestKnowledgeBaseFromJson:
    def test_from_json(self, tmp_path):
        path = tmp_path / "kb.json"
        path.write_text(json.dumps({
            "cultures": [seed.CULTURES[1]],
            "scenario_templates": [seed.SCENARIO_TEMPLATES[1]],
            "learning_modules": [seed.LEARNING_MODULES[1]],
        }), encoding="utf-8")

        kb = KnowledgeBase.from_json(path)
        assert [c.id for c in kb.list_cultures()] == ["JAPAN"]
        assert kb.get_template("SCEN002").title == "Dining with Japanese Colleagues"
        assert kb.get_learning_module("LM003") is not None

    def test_from_json_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            KnowledgeBase.from_json(tmp_path / "missing.json")
