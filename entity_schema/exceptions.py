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

"""Custom exceptions for the entity schema model."""


class EntitySchemaError(Exception):
    """Base exception for entity-schema related errors."""
    pass


class DocumentLoadError(EntitySchemaError):
    """Exception raised when a schema document cannot be read or parsed."""
    pass


class FieldTypeUsageError(EntitySchemaError, TypeError):
    """Exception raised when a field type operation is called on an unsupported receiver.

    This signals a programming error in the caller, not a problem with the data.
    """
    pass


class CyclicInheritanceError(EntitySchemaError):
    """Exception raised when an entity's parent chain loops back on itself."""

    def __init__(self, message: str, chain=None):
        super().__init__(message)
        # Parent paths followed before the walk was aborted.
        self.chain = list(chain or [])
