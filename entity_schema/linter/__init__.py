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

"""Linter package for schema project documents."""

import logging
from pathlib import Path
from typing import List

from ..exceptions import DocumentLoadError
from ..parsing.document_parser import DocumentParser
from .report import LintResult
from .reference_linter import ReferenceLinter
from .structure_linter import StructureLinter

__all__ = ['lint_files', 'LintResult']

logger = logging.getLogger(__name__)


def lint_files(file_paths: List[Path]) -> List[LintResult]:
    """Lint a list of project documents.

    Args:
        file_paths: List of file paths to lint

    Returns:
        List of LintResult objects, one per file
    """
    results = []

    parser = DocumentParser(cache_enabled=False)
    structure_linter = StructureLinter()
    reference_linter = ReferenceLinter()

    for file_path in file_paths:
        result = LintResult(Path(file_path))

        try:
            document, source_map = parser.load_document_with_source(file_path)
        except DocumentLoadError as e:
            result.add_error(str(e))
            results.append(result)
            continue

        try:
            structure_linter.lint(result.file_path, document, source_map, result)
            reference_linter.lint(result.file_path, document, source_map, result)
        except Exception as e:
            logger.exception(f"Linting {file_path} failed")
            result.add_error(f"Unexpected error during linting: {str(e)}")

        results.append(result)

    return results
