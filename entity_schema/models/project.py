# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple

from ..utils.document_utils import load_children, missing_keys
from .element_path import ElementPath
from .entity import Entity
from .enumeration import Enumeration

logger = logging.getLogger(__name__)


class FlatEntity(NamedTuple):
    path: ElementPath
    entity: Entity


class FlatEnum(NamedTuple):
    path: ElementPath
    enu: Enumeration


@dataclass
class Module:
    """A named group of entities and enumerations."""

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("entities",)

    entities: Dict[str, Entity] = field(default_factory=dict)
    enums: Dict[str, Enumeration] = field(default_factory=dict)

    def get_entity(self, name: str) -> Optional[Entity]:
        return self.entities.get(name)

    def get_enum(self, name: str) -> Optional[Enumeration]:
        return self.enums.get(name)

    def to_document(self) -> Dict[str, Any]:
        return {
            "entities": {name: entity.to_document() for name, entity in self.entities.items()},
            "enums": {name: enu.to_document() for name, enu in self.enums.items()},
        }

    @classmethod
    def load(cls, data: Any) -> Optional[Module]:
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None
        enums = data.get("enums")
        return cls(
            entities=load_children(data["entities"], Entity.load, kind="entity"),
            enums=load_children(enums, Enumeration.load, kind="enum") if enums is not None else {},
        )


@dataclass
class Project:
    """Top-level owner of the schema graph."""

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("modules",)

    name: str = ""
    version: str = ""
    # Package into which the entities are generated (Java, Kotlin, ...).
    target_package: str = ""
    modules: Dict[str, Module] = field(default_factory=dict)

    def get_module(self, name: str) -> Optional[Module]:
        return self.modules.get(name)

    def flat_entities(self) -> List[FlatEntity]:
        """List every (path, entity) pair of the project. Order is not defined."""
        return [
            FlatEntity(ElementPath(module_name, entity_name), entity)
            for module_name, module in self.modules.items()
            for entity_name, entity in module.entities.items()
        ]

    def flat_enums(self) -> List[FlatEnum]:
        """List every (path, enumeration) pair of the project. Order is not defined."""
        return [
            FlatEnum(ElementPath(module_name, enum_name), enu)
            for module_name, module in self.modules.items()
            for enum_name, enu in module.enums.items()
        ]

    def to_document(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "version": self.version,
            "targetPackage": self.target_package,
            "modules": {name: module.to_document() for name, module in self.modules.items()},
        }

    @classmethod
    def load(cls, data: Any) -> Optional[Project]:
        """Create a Project from a document; malformed children are dropped."""
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None
        project = cls(
            name=data.get("name") or "",
            version=data.get("version") or "",
            target_package=data.get("targetPackage") or "",
            modules=load_children(data["modules"], Module.load, kind="module"),
        )
        logger.debug(
            "Loaded project '%s' with %d module(s)", project.name, len(project.modules)
        )
        return project
