"""
Search result data model for labtools.

This module defines the immutable outcome of one file name search: the
matched paths per target name, derived counts, and the access errors that
were recovered from while walking the tree.
"""

from typing import Dict, List, Tuple, Any
from pydantic import BaseModel, ConfigDict, Field


class SearchResult(BaseModel):
    """
    Complete results from a single search call.

    Every requested target name is present in ``matches``, with an empty
    tuple when nothing matched.

    Attributes:
        root: Absolute path of the directory that was searched
        case_sensitive: Whether matching was case-sensitive
        matches: Absolute paths per target name, in traversal order
        errors: Messages for directories or entries that could not be read
        directories_traversed: Number of directories listed
        entries_scanned: Number of directory entries examined
    """

    model_config = ConfigDict(frozen=True)

    root: str = Field(..., min_length=1, description="Directory that was searched")
    case_sensitive: bool = Field(True, description="Whether matching was case-sensitive")
    matches: Dict[str, Tuple[str, ...]] = Field(default_factory=dict, description="Matched paths per name")
    errors: Tuple[str, ...] = Field(default_factory=tuple, description="Recovered access errors")
    directories_traversed: int = Field(0, ge=0, description="Number of directories listed")
    entries_scanned: int = Field(0, ge=0, description="Number of entries examined")

    def get_paths(self, name: str) -> List[str]:
        """Get the matched paths for a name (empty if none or not requested)."""
        return list(self.matches.get(name, ()))

    def get_count(self, name: str) -> int:
        """Get the number of occurrences found for a name."""
        return len(self.matches.get(name, ()))

    def get_counts(self) -> Dict[str, int]:
        """Get occurrence counts for every requested name."""
        return {name: len(paths) for name, paths in self.matches.items()}

    def get_total_matches(self) -> int:
        """Get the total number of matched paths across all names."""
        return sum(len(paths) for paths in self.matches.values())

    def get_found_names(self) -> List[str]:
        """Get the names that matched at least once."""
        return [name for name, paths in self.matches.items() if paths]

    def get_missing_names(self) -> List[str]:
        """Get the names that did not match anything."""
        return [name for name, paths in self.matches.items() if not paths]

    def has_errors(self) -> bool:
        """Check if any directory or entry was skipped because of an error."""
        return len(self.errors) > 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert search result to dictionary representation."""
        data = self.model_dump()
        data['matches'] = {name: list(paths) for name, paths in self.matches.items()}
        data['errors'] = list(self.errors)
        data['counts'] = self.get_counts()
        data['total_matches'] = self.get_total_matches()
        data['has_errors'] = self.has_errors()
        return data

    def __str__(self) -> str:
        """String representation of the search result."""
        parts = [f"Found {self.get_total_matches()} matches"]
        parts.append(f"{len(self.get_found_names())}/{len(self.matches)} names found")
        parts.append(f"Scanned {self.entries_scanned} entries")

        if self.has_errors():
            parts.append(f"Errors: {len(self.errors)}")

        return " | ".join(parts)
