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
from typing import TYPE_CHECKING, Any, Callable, ClassVar, Dict, List, Optional, Tuple

from ..exceptions import CyclicInheritanceError
from ..utils.document_utils import load_children, missing_keys
from .commentable import commentary_to_document, load_comment, load_config
from .element_path import ElementPath
from .enums import EntityType, ReqMethod
from .field import Field
from .field_type import TUnknown

if TYPE_CHECKING:
    from .project import Project

logger = logging.getLogger(__name__)


@dataclass(eq=False)
class Entity:
    """An object, request or response declaration.

    ``parent`` and ``response`` are named references; they are only resolved
    through a Project passed to the query methods.
    """

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("type", "isAbstract", "fieldsLocal", "genericMap")

    type: EntityType = EntityType.OBJECT
    # Abstract entities shall not be instantiated.
    is_abstract: bool = False
    parent: Optional[ElementPath] = None

    # Request-only attributes
    response: Optional[ElementPath] = None
    path: Optional[str] = None
    method: Optional[ReqMethod] = None

    # Fields declared on this entity (nothing inherited)
    fields_local: Dict[str, Field] = field(default_factory=dict)
    # Generic parameter name -> binding declared at this level
    generic_map: Dict[str, Field] = field(default_factory=dict)

    comment: str = ""
    config: Optional[Dict[str, str]] = None

    @property
    def is_request(self) -> bool:
        return self.type is EntityType.REQUEST

    def get_generic_local(self) -> List[str]:
        """Names of generic parameters mentioned by local fields, in declaration order."""
        return [
            fld.type.unknown
            for fld in self.fields_local.values()
            if isinstance(fld.type, TUnknown)
        ]

    def ancestors(self, project: Optional[Project]) -> List[Entity]:
        """Resolve the inheritance chain, eldest ancestor first and this entity last.

        The chain stops at the first parent path that does not resolve.

        Raises:
            CyclicInheritanceError: If the chain revisits an entity.
        """
        chain: List[Entity] = [self]
        followed: List[ElementPath] = []
        visited = {id(self)}

        current = self
        while current.parent is not None:
            parent = current.parent.as_entity_of(project)
            if parent is None:
                logger.debug("Parent %s does not resolve, chain starts below it", current.parent)
                break
            followed.append(current.parent)
            if id(parent) in visited:
                raise CyclicInheritanceError(
                    "Cyclic inheritance: " + " -> ".join(str(p) for p in followed),
                    chain=followed,
                )
            visited.add(id(parent))
            chain.append(parent)
            current = parent

        chain.reverse()
        return chain

    def get_generic_unsolved(self, project: Optional[Project]) -> List[str]:
        """Return the generic parameter names still unbound at this entity.

        Ancestor names come first, then local ones; a name bound in an
        entity's ``generic_map`` is removed at that level. Duplicates are kept.
        """
        if project is None:
            return []
        unsolved: List[str] = []
        for entity in self.ancestors(project):
            unsolved = [
                name
                for name in unsolved + entity.get_generic_local()
                if name not in entity.generic_map
            ]
        return unsolved

    def from_ancestor_to_me(self, project: Optional[Project], visit: Callable[[Entity], None]) -> None:
        """Call ``visit`` on every entity of the inheritance chain, root first, this entity last."""
        for entity in self.ancestors(project):
            visit(entity)

    def get_fields_all(self, project: Optional[Project]) -> Dict[str, Field]:
        """Fields including inherited ones; a descendant's field shadows its ancestors'."""
        fields: Dict[str, Field] = {}
        for entity in self.ancestors(project):
            fields.update(entity.fields_local)
        return fields

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "type": self.type.to_wire(),
            "isAbstract": self.is_abstract,
            "fieldsLocal": {name: fld.to_document() for name, fld in self.fields_local.items()},
            "genericMap": {name: fld.to_document() for name, fld in self.generic_map.items()},
            **commentary_to_document(self),
        }
        if self.parent is not None:
            document["parent"] = self.parent.to_document()
        if self.response is not None:
            document["response"] = self.response.to_document()
        if self.path is not None:
            document["path"] = self.path
        if self.method is not None:
            document["method"] = self.method.to_wire()
        return document

    @classmethod
    def load(cls, data: Any) -> Optional[Entity]:
        """Create an Entity from document data, dropping malformed fields."""
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None

        if not isinstance(data["isAbstract"], bool):
            logger.debug("Non-boolean isAbstract value %r", data["isAbstract"])
            return None

        entity_type = EntityType.from_wire(data["type"])
        if entity_type is None:
            logger.debug("Unknown entity type value %r", data["type"])
            return None

        method = None
        if data.get("method") is not None:
            method = ReqMethod.from_wire(data["method"])
            if method is None:
                logger.debug("Unknown request method value %r", data["method"])
                return None

        parent = None
        if data.get("parent") is not None:
            parent = ElementPath.load(data["parent"])

        response = None
        if data.get("response") is not None:
            response = ElementPath.load(data["response"])

        return cls(
            type=entity_type,
            is_abstract=data["isAbstract"],
            parent=parent,
            response=response,
            path=data.get("path"),
            method=method,
            fields_local=load_children(data["fieldsLocal"], Field.load, kind="field"),
            generic_map=load_children(data["genericMap"], Field.load, kind="generic binding"),
            comment=load_comment(data),
            config=load_config(data),
        )
