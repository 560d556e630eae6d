"""
Knowledge Base — the read-only tables of cultures, scenario templates and
learning modules.

Behavioral Contract:
- Built once (from seed data or a JSON file) and never mutated afterwards
- Safe to share between scenario instances without locking
- get_* lookups return None for unknown ids; require_* lookups raise
  PreconditionViolation naming the lookup that failed
"""

import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from cultural_advisor.errors import PreconditionViolation
from cultural_advisor.knowledge import seed
from cultural_advisor.models.culture import CulturalProfile
from cultural_advisor.models.learning import LearningModule
from cultural_advisor.models.scenario import ScenarioTemplate

logger = logging.getLogger(__name__)


def _index_by_id(items: Iterable, kind: str) -> Dict[str, object]:
    index: Dict[str, object] = {}
    for item in items:
        if item.id in index:
            raise ValueError(f"Duplicate {kind} id '{item.id}'")
        index[item.id] = item
    return index


class KnowledgeBase:
    """In-memory lookup over the static knowledge tables."""

    def __init__(
        self,
        cultures: List[CulturalProfile],
        scenario_templates: List[ScenarioTemplate],
        learning_modules: Optional[List[LearningModule]] = None,
    ):
        self._cultures = _index_by_id(cultures, "culture")
        self._templates = _index_by_id(scenario_templates, "scenario template")
        self._modules = _index_by_id(learning_modules or [], "learning module")
        self._warn_dangling_modules()

    @classmethod
    def from_dict(cls, data: dict) -> "KnowledgeBase":
        """Validate raw tables (keys: cultures, scenario_templates, learning_modules)."""
        return cls(
            cultures=[CulturalProfile.model_validate(c) for c in data.get("cultures", [])],
            scenario_templates=[
                ScenarioTemplate.model_validate(t)
                for t in data.get("scenario_templates", [])
            ],
            learning_modules=[
                LearningModule.model_validate(m)
                for m in data.get("learning_modules", [])
            ],
        )

    @classmethod
    def from_json(cls, path: Union[str, Path]) -> "KnowledgeBase":
        """Load a knowledge base from a JSON file."""
        path = Path(path)
        with path.open(encoding="utf-8") as f:
            data = json.load(f)
        kb = cls.from_dict(data)
        logger.info(
            "Loaded knowledge base from %s: %d cultures, %d templates, %d modules",
            path,
            len(kb._cultures),
            len(kb._templates),
            len(kb._modules),
        )
        return kb

    @classmethod
    def default(cls) -> "KnowledgeBase":
        """The built-in seed knowledge base."""
        return cls.from_dict({
            "cultures": seed.CULTURES,
            "scenario_templates": seed.SCENARIO_TEMPLATES,
            "learning_modules": seed.LEARNING_MODULES,
        })

    def _warn_dangling_modules(self) -> None:
        for template in self._templates.values():
            for module_id in template.related_learning_modules:
                if module_id not in self._modules:
                    logger.warning(
                        "Scenario template %s references unknown learning module %s",
                        template.id,
                        module_id,
                    )

    # --- Cultures ---

    def get_culture(self, culture_id: str) -> Optional[CulturalProfile]:
        return self._cultures.get(culture_id)

    def require_culture(self, culture_id: str) -> CulturalProfile:
        culture = self._cultures.get(culture_id)
        if culture is None:
            raise PreconditionViolation("culture", culture_id)
        return culture

    def list_cultures(self) -> List[CulturalProfile]:
        return list(self._cultures.values())

    # --- Scenario templates ---

    def get_template(self, template_id: str) -> Optional[ScenarioTemplate]:
        return self._templates.get(template_id)

    def require_template(self, template_id: str) -> ScenarioTemplate:
        template = self._templates.get(template_id)
        if template is None:
            raise PreconditionViolation("scenario template", template_id)
        return template

    def list_templates(self) -> List[ScenarioTemplate]:
        return list(self._templates.values())

    # --- Learning modules ---

    def get_learning_module(self, module_id: str) -> Optional[LearningModule]:
        return self._modules.get(module_id)

    def list_learning_modules(self) -> List[LearningModule]:
        return list(self._modules.values())
