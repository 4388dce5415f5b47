from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

import jsonschema

from ..models.entity import Entity
from ..models.enumeration import EnumItem, Enumeration
from ..models.field import Field
from ..models.project import Module, Project
from .json_schema_loader import load_schema


JsonPointer = str

SEVERITY_ERROR = "error"
SEVERITY_WARNING = "warning"


@dataclass(frozen=True)
class SchemaIssue:
    message: str
    yaml_path: Optional[JsonPointer] = None
    severity: str = SEVERITY_ERROR


def _jp_escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


def join_path(base: Optional[JsonPointer], token: str) -> JsonPointer:
    if not base:
        return f"/{_jp_escape(token)}"
    return f"{base}/{_jp_escape(token)}"


def validate_document(document: Any, *, json_schema_dict: Optional[dict] = None) -> List[SchemaIssue]:
    """Validate a project document against the bundled JSON Schema.

    Every violation is reported, not only the first one.

    Args:
        document: Parsed document
        json_schema_dict: Schema to use instead of the bundled project schema

    Returns:
        List of SchemaIssue objects, ordered by document path
    """
    if not isinstance(document, dict):
        return [SchemaIssue(message="Root must be a mapping/object", yaml_path="")]

    schema = json_schema_dict if json_schema_dict is not None else load_schema("project")
    validator_cls = jsonschema.validators.validator_for(schema)
    validator = validator_cls(schema)

    issues: List[SchemaIssue] = []
    for error in sorted(validator.iter_errors(document), key=lambda e: [str(p) for p in e.absolute_path]):
        path = "".join(join_path("", str(p)) for p in error.absolute_path)
        issues.append(SchemaIssue(message=error.message, yaml_path=path))
    return issues


def _drop_reason(data: Any, required_keys, what: str) -> str:
    if not isinstance(data, dict):
        return f"{what} must be a mapping"
    missing = [key for key in required_keys if data.get(key) is None]
    if missing:
        return f"{what} is missing required field(s): " + ", ".join(f"'{key}'" for key in missing)
    return f"{what} has an unsupported value"


def _check_children(
    raw: Any,
    loader: Callable[[Any], Any],
    required_keys,
    what: str,
    path: JsonPointer,
    issues: List[SchemaIssue],
    on_loaded: Optional[Callable[[str, Any, JsonPointer], None]] = None,
) -> None:
    if not isinstance(raw, dict):
        return
    for name, data in raw.items():
        child_path = join_path(path, str(name))
        if loader(data) is None:
            issues.append(
                SchemaIssue(
                    message=f"{_drop_reason(data, required_keys, f'{what} {name!r}')}; it will be skipped",
                    yaml_path=child_path,
                    severity=SEVERITY_WARNING,
                )
            )
        elif on_loaded is not None:
            on_loaded(name, data, child_path)


def find_dropped_nodes(document: Any) -> List[SchemaIssue]:
    """Report every node that ``Project.load`` would silently drop.

    Uses the model loaders themselves, so the report matches what the loaded
    graph will actually contain.
    """
    issues: List[SchemaIssue] = []
    if Project.load(document) is None:
        issues.append(
            SchemaIssue(
                message=_drop_reason(document, Project.REQUIRED_KEYS, "Project"),
                yaml_path="",
            )
        )
        return issues

    def _entity_loaded(name: str, data: Dict[str, Any], path: JsonPointer) -> None:
        for key in ("fieldsLocal", "genericMap"):
            _check_children(data[key], Field.load, Field.REQUIRED_KEYS, "Field", join_path(path, key), issues)

    def _enum_loaded(name: str, data: Dict[str, Any], path: JsonPointer) -> None:
        _check_children(
            data["enumMap"], EnumItem.load, EnumItem.REQUIRED_KEYS, "Enum item", join_path(path, "enumMap"), issues
        )

    def _module_loaded(name: str, data: Dict[str, Any], path: JsonPointer) -> None:
        _check_children(
            data["entities"], Entity.load, Entity.REQUIRED_KEYS, "Entity",
            join_path(path, "entities"), issues, _entity_loaded,
        )
        _check_children(
            data.get("enums"), Enumeration.load, Enumeration.REQUIRED_KEYS, "Enum",
            join_path(path, "enums"), issues, _enum_loaded,
        )

    _check_children(document["modules"], Module.load, Module.REQUIRED_KEYS, "Module", "/modules", issues, _module_loaded)
    return issues
