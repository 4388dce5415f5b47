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

"""Enumerated values that cross the document boundary as integers.

Internally these are proper ``Enum`` members; the integer encoding only exists
in the wire tables below, which are used by the loaders and serializers.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, Optional


def _decode_wire(value: Any, table: Dict[int, Any]) -> Any:
    # bool is an int subclass; true/false are never valid wire values here.
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return table.get(value)


class EntityType(Enum):
    OBJECT = "object"
    REQUEST = "request"
    RESPONSE = "response"

    @classmethod
    def from_wire(cls, value: Any) -> Optional[EntityType]:
        """Decode the integer document form, or None if it is not in the table."""
        return _decode_wire(value, ENTITY_TYPE_BY_WIRE)

    def to_wire(self) -> int:
        return WIRE_BY_ENTITY_TYPE[self]


class ReqMethod(Enum):
    # HTTP
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"
    CONNECT = "CONNECT"
    OPTIONS = "OPTIONS"
    TRACE = "TRACE"
    PATCH = "PATCH"

    # SOCKET or MQTT
    SOCKET = "SOCKET"
    MQTT = "MQTT"

    @classmethod
    def from_wire(cls, value: Any) -> Optional[ReqMethod]:
        """Decode the integer document form, or None if it is not in the table."""
        return _decode_wire(value, REQ_METHOD_BY_WIRE)

    def to_wire(self) -> int:
        return WIRE_BY_REQ_METHOD[self]

    @property
    def is_http(self) -> bool:
        return self not in (ReqMethod.SOCKET, ReqMethod.MQTT)


ENTITY_TYPE_BY_WIRE: Dict[int, EntityType] = {
    0: EntityType.OBJECT,
    1: EntityType.REQUEST,
    2: EntityType.RESPONSE,
}

REQ_METHOD_BY_WIRE: Dict[int, ReqMethod] = {
    0: ReqMethod.GET,
    1: ReqMethod.HEAD,
    2: ReqMethod.POST,
    3: ReqMethod.PUT,
    4: ReqMethod.DELETE,
    5: ReqMethod.CONNECT,
    6: ReqMethod.OPTIONS,
    7: ReqMethod.TRACE,
    8: ReqMethod.PATCH,
    9: ReqMethod.SOCKET,
    10: ReqMethod.MQTT,
}

WIRE_BY_ENTITY_TYPE: Dict[EntityType, int] = {member: wire for wire, member in ENTITY_TYPE_BY_WIRE.items()}
WIRE_BY_REQ_METHOD: Dict[ReqMethod, int] = {member: wire for wire, member in REQ_METHOD_BY_WIRE.items()}
