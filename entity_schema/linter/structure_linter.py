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

"""Structure and schema linter for project documents.

Validates the document against the bundled JSON Schema and reports the nodes
the loader would skip, with document locations when available.
"""

from pathlib import Path
from typing import Any, Dict

from ..file_io.source_location import lookup_source
from ..schema.document_schema import find_dropped_nodes, validate_document
from .report import LintResult


class StructureLinter:
    """Linter for structure and schema validation."""

    def lint(
        self,
        file_path: Path,
        document: Any,
        source_map: Dict[str, Dict[str, int]],
        result: LintResult,
    ):
        """Lint the structure of a parsed document.

        Args:
            file_path: Path of the linted file
            document: Parsed document
            source_map: Document path to line/column map
            result: LintResult to add errors/warnings to
        """
        issues = validate_document(document)
        if isinstance(document, dict):
            issues.extend(find_dropped_nodes(document))

        for issue in issues:
            result.add_issue(issue, lookup_source(source_map, issue.yaml_path, file_path))
