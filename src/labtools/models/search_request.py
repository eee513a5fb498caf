"""
Search request data model for labtools.

This module defines the validated input of a file name search: the root
directory, the target names to look for and the case-sensitivity flag.
"""

import os
from typing import Dict, List, Any
from pathlib import Path
from pydantic import BaseModel, Field, field_validator


class SearchRequest(BaseModel):
    """
    Represents a file name search with all of its parameters.

    Attributes:
        root: Root directory the search starts from
        targets: File base names to look for (duplicates removed, order kept)
        case_sensitive: Whether names must match exactly or case-folded
    """

    root: str = Field(..., description="Root directory to search")
    targets: List[str] = Field(..., description="File names to search for")
    case_sensitive: bool = Field(True, description="Whether name matching is case-sensitive")

    @field_validator('root')
    @classmethod
    def validate_root(cls, v: str) -> str:
        """Reject empty and whitespace-only root paths."""
        if not v or not v.strip():
            raise ValueError("Directory path cannot be null or empty")
        return v

    @field_validator('targets')
    @classmethod
    def validate_targets(cls, v: List[str]) -> List[str]:
        """Validate target names and drop repeated entries."""
        if not v:
            raise ValueError("File names list cannot be null or empty")

        unique_targets = []
        for name in v:
            if not name:
                raise ValueError("File names cannot be empty strings")
            if name not in unique_targets:
                unique_targets.append(name)

        return unique_targets

    def get_root_path(self) -> Path:
        """Get the root directory as an absolute, unresolved path."""
        return Path(os.path.abspath(os.path.expanduser(self.root)))

    def to_dict(self) -> Dict[str, Any]:
        """Convert the request to a dictionary representation."""
        return self.model_dump()

    def __str__(self) -> str:
        """String representation of the search request."""
        mode = "case-sensitive" if self.case_sensitive else "case-insensitive"
        return f"Root: '{self.root}' | Targets: {len(self.targets)} | {mode}"
