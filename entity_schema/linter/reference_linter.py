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

"""Reference linter: resolves every path of the loaded project."""

import logging
from pathlib import Path
from typing import Any, Dict

from ..file_io.source_location import lookup_source
from ..models.project import Project
from ..schema.reference_checks import find_reference_issues
from .report import LintResult

logger = logging.getLogger(__name__)


class ReferenceLinter:
    """Linter for parent, response and field type references."""

    def lint(
        self,
        file_path: Path,
        document: Any,
        source_map: Dict[str, Dict[str, int]],
        result: LintResult,
    ):
        project = Project.load(document)
        if project is None:
            # Already reported by the structure linter.
            return

        logger.debug(f"Checking references of {len(project.flat_entities())} entities in {file_path}")
        for issue in find_reference_issues(project):
            result.add_issue(issue, lookup_source(source_map, issue.yaml_path, file_path))
