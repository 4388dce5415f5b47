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

"""Schema document reader (YAML or JSON) with caching support."""

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml

from ..config import schema_config
from ..exceptions import DocumentLoadError
from ..models.project import Project

logger = logging.getLogger(__name__)

SourceMap = Dict[str, Dict[str, int]]

DOCUMENT_SUFFIXES = (".yaml", ".yml", ".json")


def _json_pointer_escape(token: str) -> str:
    # JSON Pointer escaping: "~" -> "~0", "/" -> "~1"
    return token.replace("~", "~0").replace("/", "~1")


def build_source_map(content: str) -> SourceMap:
    """Map JSON-pointer paths of a document to 1-based line/column.

    Uses the PyYAML node tree so locations are tracked without changing the
    shapes returned by ``safe_load``. JSON input works too, being a YAML subset.
    """
    source_map: SourceMap = {}

    try:
        root = yaml.compose(content, Loader=yaml.SafeLoader)
    except yaml.YAMLError:
        # Syntax errors surface from safe_load instead.
        return source_map

    if root is None:
        return source_map

    def _walk(node, path: str) -> None:
        mark = getattr(node, "start_mark", None)
        if mark is not None:
            source_map[path] = {"line": int(mark.line) + 1, "column": int(mark.column) + 1}

        if isinstance(node, yaml.nodes.MappingNode):
            for key_node, value_node in node.value:
                key = getattr(key_node, "value", None)
                if key is None:
                    continue
                _walk(value_node, f"{path}/{_json_pointer_escape(str(key))}")
        elif isinstance(node, yaml.nodes.SequenceNode):
            for idx, item_node in enumerate(node.value):
                _walk(item_node, f"{path}/{idx}")

    _walk(root, "")
    return source_map


class DocumentParser:
    """Reads schema documents from disk or strings."""

    def __init__(self, cache_enabled: Optional[bool] = None):
        """Initialize the parser.

        Args:
            cache_enabled: Whether to cache parsed files. If None, uses global config.
        """
        self.cache_enabled = cache_enabled if cache_enabled is not None else schema_config.cache_enabled
        self._cache: Dict[Path, Tuple[Dict[str, Any], SourceMap]] = {}

    @staticmethod
    def _parse(content: str, origin: str) -> Dict[str, Any]:
        try:
            document = yaml.safe_load(content)
        except yaml.YAMLError as exc:
            raise DocumentLoadError(f"Failed to parse document {origin}: {exc}") from exc
        if document is None:
            return {}
        return document

    def load_document_with_source(self, file_path: Union[str, Path]) -> Tuple[Dict[str, Any], SourceMap]:
        """Load a document file and return (document, source_map).

        Raises:
            DocumentLoadError: If the file is missing, unreadable or invalid.
        """
        path = Path(file_path)

        if not path.exists():
            raise DocumentLoadError(f"Document file not found: {path}")
        if not path.is_file():
            raise DocumentLoadError(f"Path is not a file: {path}")

        if self.cache_enabled and path in self._cache:
            logger.debug(f"Loading document from cache: {path}")
            return self._cache[path]

        logger.debug(f"Loading document file: {path}")
        try:
            content = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentLoadError(f"Failed to read document file {path}: {exc}") from exc

        document = self._parse(content, str(path))
        source_map = build_source_map(content)

        if self.cache_enabled:
            self._cache[path] = (document, source_map)
        return document, source_map

    def load_document(self, file_path: Union[str, Path]) -> Dict[str, Any]:
        """Load a document file.

        Raises:
            DocumentLoadError: If the file is missing, unreadable or invalid.
        """
        document, _ = self.load_document_with_source(file_path)
        return document

    def load_document_from_string(self, content: str) -> Dict[str, Any]:
        """Parse a document held in memory."""
        return self._parse(content, "<string>")

    def load_project(self, file_path: Union[str, Path]) -> Optional[Project]:
        """Read a document file and build a Project from it.

        Returns None when the document does not describe a project.
        """
        document = self.load_document(file_path)
        project = Project.load(document)
        if project is None:
            logger.warning(f"Document {file_path} does not describe a project")
        return project

    def clear_cache(self) -> None:
        self._cache.clear()
        logger.debug("Document cache cleared")


# Global parser instance
document_parser = DocumentParser()
