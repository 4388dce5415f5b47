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

"""Reference checks over a loaded project.

Unresolved paths are a valid state of the model; here they are reported for
the benefit of whoever consumes the project next.
"""

import logging
from typing import Iterable, List

from ..exceptions import CyclicInheritanceError
from ..models.element_path import ElementPath
from ..models.field import Field
from ..models.field_type import FieldType, TEnum, TList, TObject
from ..models.project import Project
from .document_schema import SEVERITY_ERROR, SEVERITY_WARNING, SchemaIssue, join_path

logger = logging.getLogger(__name__)


def _entity_pointer(path: ElementPath) -> str:
    return join_path(join_path(join_path("/modules", str(path.module)), "entities"), str(path.name))


def _type_references(field_type: FieldType) -> Iterable[FieldType]:
    while isinstance(field_type, TList):
        field_type = field_type.member
    if isinstance(field_type, (TObject, TEnum)):
        yield field_type


def _check_field(project: Project, field: Field, pointer: str) -> List[SchemaIssue]:
    issues: List[SchemaIssue] = []
    for ref in _type_references(field.type):
        if isinstance(ref, TObject) and ref.entity.as_entity_of(project) is None:
            issues.append(
                SchemaIssue(
                    message=f"Unresolved entity reference '{ref.entity}'",
                    yaml_path=pointer,
                    severity=SEVERITY_WARNING,
                )
            )
        elif isinstance(ref, TEnum) and ref.enu.as_enum_of(project) is None:
            issues.append(
                SchemaIssue(
                    message=f"Unresolved enum reference '{ref.enu}'",
                    yaml_path=pointer,
                    severity=SEVERITY_WARNING,
                )
            )
    return issues


def find_reference_issues(project: Project) -> List[SchemaIssue]:
    """Report unresolved paths and broken inheritance in a project."""
    issues: List[SchemaIssue] = []

    for path, entity in project.flat_entities():
        pointer = _entity_pointer(path)

        if entity.parent is not None and entity.parent.as_entity_of(project) is None:
            if entity.parent.as_enum_of(project) is not None:
                issues.append(
                    SchemaIssue(
                        message=f"Parent '{entity.parent}' of '{path}' is an enumeration, not an entity",
                        yaml_path=join_path(pointer, "parent"),
                    )
                )
            else:
                issues.append(
                    SchemaIssue(
                        message=f"Unresolved parent '{entity.parent}' of '{path}'",
                        yaml_path=join_path(pointer, "parent"),
                        severity=SEVERITY_WARNING,
                    )
                )

        if entity.response is not None and entity.response.as_entity_of(project) is None:
            issues.append(
                SchemaIssue(
                    message=f"Unresolved response '{entity.response}' of '{path}'",
                    yaml_path=join_path(pointer, "response"),
                    severity=SEVERITY_WARNING,
                )
            )

        for key, fields in (("fieldsLocal", entity.fields_local), ("genericMap", entity.generic_map)):
            for name, field in fields.items():
                issues.extend(_check_field(project, field, join_path(join_path(pointer, key), name)))

        try:
            entity.ancestors(project)
        except CyclicInheritanceError as exc:
            logger.debug(f"Inheritance walk of {path} failed: {exc}")
            issues.append(SchemaIssue(message=str(exc), yaml_path=join_path(pointer, "parent"), severity=SEVERITY_ERROR))

    return issues
