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

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Optional

if TYPE_CHECKING:
    from .entity import Entity
    from .enumeration import Enumeration
    from .project import Project


@dataclass(frozen=True)
class ElementPath:
    """Coordinate of an entity or enumeration inside a project.

    A path only stores the lookup key. It is resolved against a Project at call
    time, so a miss is a normal "unresolved reference" result rather than an
    error.
    """

    module: Optional[str] = None
    name: Optional[str] = None

    def __str__(self) -> str:
        return f"{self.module}.{self.name}"

    def equals(self, another: Optional[ElementPath]) -> bool:
        """Return True if another path names the same (module, name) pair."""
        if another is None:
            return False
        return another.module == self.module and another.name == self.name

    @property
    def is_complete(self) -> bool:
        return self.module is not None and self.name is not None

    def as_entity_of(self, project: Optional[Project]) -> Optional[Entity]:
        """Return the entity this path designates in the project, or None."""
        if project is None or not self.is_complete:
            return None
        module = project.modules.get(self.module)
        if module is None:
            return None
        return module.entities.get(self.name)

    def as_enum_of(self, project: Optional[Project]) -> Optional[Enumeration]:
        """Return the enumeration this path designates in the project, or None."""
        if project is None or not self.is_complete:
            return None
        module = project.modules.get(self.module)
        if module is None:
            return None
        return module.enums.get(self.name)

    def to_document(self) -> Dict[str, Any]:
        return {"module": self.module, "name": self.name}

    @classmethod
    def load(cls, data: Any) -> Optional[ElementPath]:
        """Create an ElementPath from document data.

        Both coordinates are optional; only a non-mapping document is rejected.
        """
        if not isinstance(data, dict):
            return None
        return cls(module=data.get("module"), name=data.get("name"))
