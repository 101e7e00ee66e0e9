"""
Configuration type definitions for TileMerge.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List


class ConfigVersion(Enum):
    """Configuration version stamped into stored settings."""
    V1_0 = "1.0"
    CURRENT = V1_0


@dataclass
class ValidationResult:
    """Result of configuration validation."""
    is_valid: bool
    errors: List[str]
    warnings: List[str]
