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

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, NamedTuple, Optional, Tuple, Union

from ..utils.document_utils import load_children, missing_keys
from .commentable import commentary_to_document, load_comment, load_config

Number = Union[int, float]


@dataclass
class EnumItem:
    """Item of an enumeration."""

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("value",)

    value: Number
    # The document name may differ from the generated name, e.g. when the
    # document name violates identifier rules of the target language.
    realname: Optional[str] = None
    comment: str = ""
    config: Optional[Dict[str, str]] = None

    def to_document(self) -> Dict[str, Any]:
        document: Dict[str, Any] = {"value": self.value, **commentary_to_document(self)}
        if self.realname is not None:
            document["realname"] = self.realname
        return document

    @classmethod
    def load(cls, data: Any) -> Optional[EnumItem]:
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None
        value = data["value"]
        # bool is an int subclass but never a valid item value.
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return None
        return cls(
            value=value,
            realname=data.get("realname"),
            comment=load_comment(data),
            config=load_config(data),
        )


class FlatEnumItem(NamedTuple):
    name: str
    item: EnumItem


@dataclass
class Enumeration:
    """Enumeration: a name-keyed set of numbered items."""

    REQUIRED_KEYS: ClassVar[Tuple[str, ...]] = ("enumMap",)

    enum_map: Dict[str, EnumItem] = field(default_factory=dict)
    comment: str = ""
    config: Optional[Dict[str, str]] = None

    def first(self) -> Optional[EnumItem]:
        """Return the item with the smallest value, or None if empty."""
        name = self.first_name()
        return None if name is None else self.enum_map[name]

    def first_name(self) -> Optional[str]:
        """Return the name of the item with the smallest value.

        When several items share the smallest value the winner is unspecified;
        callers must not rely on a particular one.
        """
        lowest: Optional[Number] = None
        first: Optional[str] = None
        for name, item in self.enum_map.items():
            if lowest is None or item.value <= lowest:
                lowest = item.value
                first = name
        return first

    def flat(self) -> List[FlatEnumItem]:
        """List every (name, item) pair. Order is not defined."""
        return [FlatEnumItem(name, item) for name, item in self.enum_map.items()]

    def to_document(self) -> Dict[str, Any]:
        return {
            "enumMap": {name: item.to_document() for name, item in self.enum_map.items()},
            **commentary_to_document(self),
        }

    @classmethod
    def load(cls, data: Any) -> Optional[Enumeration]:
        if missing_keys(data, cls.REQUIRED_KEYS):
            return None
        return cls(
            enum_map=load_children(data["enumMap"], EnumItem.load, kind="enum item"),
            comment=load_comment(data),
            config=load_config(data),
        )
