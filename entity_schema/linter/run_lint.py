#!/usr/bin/env python3
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

"""CLI entry point for linting schema project documents."""

import argparse
import json
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from ..config import schema_config
from ..parsing.document_parser import DOCUMENT_SUFFIXES
from . import LintResult, lint_files

# Suffixes picked up when scanning directories.
PROJECT_FILE_SUFFIXES = tuple(f".project{suffix}" for suffix in DOCUMENT_SUFFIXES)


def find_project_files(paths: List[str]) -> List[Path]:
    """Find all project documents in the given paths."""
    project_files = []

    for path_str in paths:
        path = Path(path_str)

        if not path.exists():
            print(f"Warning: Path does not exist: {path}", file=sys.stderr)
            continue

        if path.is_file():
            if path.suffix in DOCUMENT_SUFFIXES:
                project_files.append(path)
            else:
                print(f"Warning: File is not a YAML or JSON document: {path}", file=sys.stderr)
        elif path.is_dir():
            for suffix in PROJECT_FILE_SUFFIXES:
                project_files.extend(path.rglob(f'*{suffix}'))
        else:
            print(f"Warning: Path is neither file nor directory: {path}", file=sys.stderr)

    return sorted(set(project_files))


def _annotation(kind: str, file_path: Path, entry: Dict[str, Any]) -> str:
    location = f"file={file_path},line={entry.get('line', 1)}"
    if 'column' in entry:
        location += f",col={entry['column']}"
    return f"::{kind} {location}::{entry['message']}"


def _print_results(results: List[LintResult], output_format: str) -> None:
    if output_format == 'json':
        output = {
            'files': len(results),
            'errors': sum(len(r.errors) for r in results),
            'warnings': sum(len(r.warnings) for r in results),
            'results': [
                {'file': str(r.file_path), 'errors': r.errors, 'warnings': r.warnings}
                for r in results
            ],
        }
        print(json.dumps(output, indent=2))
        return

    if output_format == 'github-actions':
        for result in results:
            for error in result.errors:
                print(_annotation('error', result.file_path, error))
            for warning in result.warnings:
                print(_annotation('warning', result.file_path, warning))
        return

    for result in results:
        if not (result.errors or result.warnings):
            continue
        print(f"\n{result.file_path}:")
        for label, entries in (('ERROR', result.errors), ('WARNING', result.warnings)):
            for entry in entries:
                line_info = f":{entry['line']}" if 'line' in entry else ""
                print(f"  {label}{line_info}: {entry['message']}")


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for the linter CLI."""
    parser = argparse.ArgumentParser(
        description='Lint entity schema project documents',
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        'paths',
        nargs='*',
        default=None,
        help='File paths or directories to lint (default: current directory)',
    )
    parser.add_argument(
        '--format',
        choices=['human', 'json', 'github-actions'],
        default='human',
        help='Output format (default: human)',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log loader diagnostics at DEBUG level',
    )

    args = parser.parse_args(argv)

    if args.verbose:
        schema_config.log_level = 'DEBUG'
    schema_config.set_logging()

    if not args.paths:
        args.paths = ['.']

    project_files = find_project_files(args.paths)

    if not project_files:
        print("No project documents found.", file=sys.stderr)
        sys.exit(1)

    results = lint_files(project_files)
    _print_results(results, args.format)

    total_errors = sum(len(r.errors) for r in results)
    if total_errors > 0:
        sys.exit(1)
    if args.format == 'human':
        print("Lint succeeded with no errors.")
    sys.exit(0)


if __name__ == '__main__':
    main()
