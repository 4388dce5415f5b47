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

"""Configuration management for the entity schema tooling."""

import logging
import os
from dataclasses import dataclass
from typing import Optional

from .utils.logging_utils import configure_split_stream_logging

ENV_PREFIX = "ENTITY_SCHEMA_"


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(ENV_PREFIX + name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass
class SchemaConfig:
    """Configuration class for loading and inspecting schema projects."""
    log_level: str = "INFO"
    print_level: str = "ERROR"
    cache_enabled: bool = True
    # Lint locations are shown relative to this directory when set.
    source_root: Optional[str] = None

    @classmethod
    def from_env(cls) -> 'SchemaConfig':
        """Create configuration from environment variables."""
        return cls(
            log_level=os.getenv(ENV_PREFIX + 'LOG_LEVEL', 'INFO'),
            print_level=os.getenv(ENV_PREFIX + 'PRINT_LEVEL', 'ERROR'),
            cache_enabled=_env_bool('CACHE_ENABLED', 'true'),
            source_root=os.getenv(ENV_PREFIX + 'SOURCE_ROOT') or None,
        )

    def set_logging(self) -> logging.Logger:
        """Setup logging based on configuration."""
        level = getattr(logging, self.log_level.upper(), logging.INFO)
        stderr_level = getattr(logging, self.print_level.upper(), logging.ERROR)

        configure_split_stream_logging(level=level, stderr_level=stderr_level)

        return logging.getLogger('entity_schema')


# Global configuration instance
schema_config = SchemaConfig.from_env()
