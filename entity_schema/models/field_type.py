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

"""Field type variants.

The set of variants is closed: nine payload-less primitives plus ``TObject``,
``TEnum``, ``TList`` and ``TUnknown``. Each variant is a frozen dataclass whose
``TAG`` is the ``type`` discriminator used in documents.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Optional, Tuple, Type

from ..exceptions import FieldTypeUsageError
from .element_path import ElementPath

logger = logging.getLogger(__name__)


class FieldType:
    """Base of every field type variant."""

    TAG: ClassVar[str] = ""

    @property
    def type(self) -> str:
        return self.TAG

    def equals(self, another: Optional[FieldType]) -> bool:
        """Check if this type is the same as another.

        Object and enum references compare by path only; the referenced
        entity is never unrolled.
        """
        return field_type_equals(self, another)

    def equals_even_in_list(self, another: Optional[FieldType]) -> bool:
        """Check if this type equals another, looking through list wrappers of the other.

        The receiver is the non-list target type; ``another`` may be wrapped in
        any number of ``TList`` layers.

        Raises:
            FieldTypeUsageError: If called on a ``TList`` receiver.
        """
        if isinstance(self, TList):
            raise FieldTypeUsageError("List field type shall not use equals_even_in_list")
        candidate = another
        while isinstance(candidate, TList):
            candidate = candidate.member
        return self.equals(candidate)

    def to_document(self) -> Dict[str, Any]:
        return {"type": self.TAG}

    @classmethod
    def load(cls, data: Any) -> Optional[FieldType]:
        """Create a field type from document data.

        Returns None when the discriminator is missing or unrecognised, or a
        composite variant lacks its payload.
        """
        if not isinstance(data, dict):
            return None
        tag = data.get("type")
        if not isinstance(tag, str):
            return None

        primitive = PRIMITIVE_TYPES.get(tag)
        if primitive is not None:
            return primitive()

        if tag == TObject.TAG:
            entity = ElementPath.load(data.get("entity"))
            return TObject(entity) if entity is not None else None

        if tag == TEnum.TAG:
            enu = ElementPath.load(data.get("enu"))
            return TEnum(enu) if enu is not None else None

        if tag == TList.TAG:
            if data.get("member") is None:
                return None
            member = FieldType.load(data["member"])
            return TList(member) if member is not None else None

        if tag == TUnknown.TAG:
            unknown = data.get("unknown")
            return TUnknown(unknown) if unknown is not None else None

        logger.debug("Unsupported field type '%s'", tag)
        return None


@dataclass(frozen=True)
class TInteger(FieldType):
    TAG: ClassVar[str] = "TInteger"


@dataclass(frozen=True)
class TLong(FieldType):
    TAG: ClassVar[str] = "TLong"


@dataclass(frozen=True)
class TDouble(FieldType):
    TAG: ClassVar[str] = "TDouble"


@dataclass(frozen=True)
class TID(FieldType):
    TAG: ClassVar[str] = "TID"


@dataclass(frozen=True)
class TURL(FieldType):
    TAG: ClassVar[str] = "TURL"


@dataclass(frozen=True)
class TDateTime(FieldType):
    TAG: ClassVar[str] = "TDateTime"


@dataclass(frozen=True)
class TBoolean(FieldType):
    TAG: ClassVar[str] = "TBoolean"


@dataclass(frozen=True)
class TString(FieldType):
    TAG: ClassVar[str] = "TString"


@dataclass(frozen=True)
class TSSMap(FieldType):
    """String-to-string map."""

    TAG: ClassVar[str] = "TSSMap"


@dataclass(frozen=True)
class TObject(FieldType):
    """Reference to an object entity."""

    TAG: ClassVar[str] = "TObject"
    entity: ElementPath

    def to_document(self) -> Dict[str, Any]:
        return {"type": self.TAG, "entity": self.entity.to_document()}


@dataclass(frozen=True)
class TEnum(FieldType):
    """Reference to an enumeration."""

    TAG: ClassVar[str] = "TEnum"
    enu: ElementPath

    def to_document(self) -> Dict[str, Any]:
        return {"type": self.TAG, "enu": self.enu.to_document()}


@dataclass(frozen=True)
class TList(FieldType):
    """Homogeneous list; the member may itself be a list."""

    TAG: ClassVar[str] = "TList"
    member: FieldType

    def to_document(self) -> Dict[str, Any]:
        return {"type": self.TAG, "member": self.member.to_document()}


@dataclass(frozen=True)
class TUnknown(FieldType):
    """Unresolved generic type parameter, named by ``unknown``."""

    TAG: ClassVar[str] = "TUnknown"
    unknown: str

    def to_document(self) -> Dict[str, Any]:
        return {"type": self.TAG, "unknown": self.unknown}


PRIMITIVE_TYPES: Dict[str, Type[FieldType]] = {
    variant.TAG: variant
    for variant in (TInteger, TLong, TDouble, TID, TURL, TDateTime, TBoolean, TString, TSSMap)
}

COMPOSITE_TYPES: Dict[str, Type[FieldType]] = {
    variant.TAG: variant for variant in (TObject, TEnum, TList, TUnknown)
}

ALL_TYPE_TAGS: Tuple[str, ...] = tuple(PRIMITIVE_TYPES) + tuple(COMPOSITE_TYPES)


def field_type_equals(this: FieldType, another: Optional[FieldType]) -> bool:
    """Structural equality over the closed variant set."""
    if not isinstance(another, FieldType):
        return False
    if this.TAG != another.TAG:
        return False

    if isinstance(this, TObject):
        return this.entity.equals(another.entity)
    if isinstance(this, TEnum):
        return this.enu.equals(another.enu)
    if isinstance(this, TList):
        return this.member.equals(another.member)
    if isinstance(this, TUnknown):
        return this.unknown == another.unknown
    if this.TAG in PRIMITIVE_TYPES:
        return True

    raise TypeError(f"Unknown field type variant: {type(this).__name__}")
