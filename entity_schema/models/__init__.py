"""Schema object model: projects, modules, entities, enumerations and field types."""

from .commentable import Commentable, config_value
from .element_path import ElementPath
from .entity import Entity
from .enumeration import EnumItem, Enumeration, FlatEnumItem
from .enums import EntityType, ReqMethod
from .field import Field
from .field_type import (
    FieldType,
    TBoolean,
    TDateTime,
    TDouble,
    TEnum,
    TID,
    TInteger,
    TList,
    TLong,
    TObject,
    TSSMap,
    TString,
    TUnknown,
    TURL,
)
from .project import FlatEntity, FlatEnum, Module, Project

__all__ = [
    "Commentable",
    "config_value",
    "ElementPath",
    "Entity",
    "EntityType",
    "EnumItem",
    "Enumeration",
    "Field",
    "FieldType",
    "FlatEntity",
    "FlatEnum",
    "FlatEnumItem",
    "Module",
    "Project",
    "ReqMethod",
    "TBoolean",
    "TDateTime",
    "TDouble",
    "TEnum",
    "TID",
    "TInteger",
    "TList",
    "TLong",
    "TObject",
    "TSSMap",
    "TString",
    "TUnknown",
    "TURL",
]
