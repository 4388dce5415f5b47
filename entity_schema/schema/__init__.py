"""Schema document validation.

This package intentionally stays out of the model classes so that loading keeps
its silent-drop contract; validation only reports.
"""

from .document_schema import (
    SEVERITY_ERROR,
    SEVERITY_WARNING,
    SchemaIssue,
    find_dropped_nodes,
    validate_document,
)
from .json_schema_loader import load_schema
from .reference_checks import find_reference_issues
