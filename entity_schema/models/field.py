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
from typing import Any, ClassVar, Dict, Optional, Tuple

from ..utils.document_utils import missing_keys
from .commentable import commentary_to_document, load_comment, load_config
from .field_type import FieldType


@dataclass
class Field:
    """A typed entity member.

    The same class describes a local field (``Entity.fields_local``) and a
    generic binding (``Entity.generic_map``); the holding mapping decides the
    role.
    """

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("type", "isOptional", "isPathParameter")

    type: FieldType
    is_optional: bool = False
    # True if the value travels in the URL path rather than the body.
    is_path_parameter: bool = False
    # Generation-facing name when the key is not a valid target identifier.
    realname: Optional[str] = None
    fixed_value: Any = None
    comment: str = ""
    config: Optional[Dict[str, str]] = None

    @property
    def has_fixed_value(self) -> bool:
        return self.fixed_value is not None

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {
            "type": self.type.to_document(),
            "isOptional": self.is_optional,
            "isPathParameter": self.is_path_parameter,
            **commentary_to_document(self),
        }
        if self.realname is not None:
            document["realname"] = self.realname
        if self.fixed_value is not None:
            document["fixedValue"] = self.fixed_value
        return document

    @classmethod
    def load(cls, data: Any) -> Optional[Field]:
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None
        field_type = FieldType.load(data["type"])
        if field_type is None:
            return None
        if not isinstance(data["isOptional"], bool) or not isinstance(data["isPathParameter"], bool):
            return None
        return cls(
            type=field_type,
            is_optional=data["isOptional"],
            is_path_parameter=data["isPathParameter"],
            realname=data.get("realname"),
            fixed_value=data.get("fixedValue"),
            comment=load_comment(data),
            config=load_config(data),
        )
