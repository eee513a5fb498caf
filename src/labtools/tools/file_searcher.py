"""
Recursive file name searcher for labtools.

This module walks a directory tree and collects the absolute paths of every
entry whose base name matches one of a set of target names. Symbolic links
are never followed or matched, and unreadable directories are skipped
without aborting the search.
"""

import os
from pathlib import Path
from typing import Dict, List, Optional, Iterable, Tuple
import logging

from pydantic import ValidationError

from ..errors import InvalidArgumentError, NotFoundError
from ..models.search_request import SearchRequest
from ..models.search_results import SearchResult


logger = logging.getLogger(__name__)


class FileSearcher:
    """
    Depth-first file name search over a directory tree.

    This class provides:
    - Exact or case-folded matching of entry base names against target names
    - Per-name match lists and occurrence counts
    - Skipping of symbolic links, so link cycles cannot loop the walk
    - Recovery from permission errors on individual directories and entries

    Each call to ``search`` builds its own accumulators, so concurrent calls
    on one instance do not interfere. The instance only keeps the most recent
    result for ``get_file_count``.
    """

    def __init__(self, case_sensitive: bool = True):
        """
        Initialize the file searcher.

        Args:
            case_sensitive: Default matching mode for ``search`` calls
        """
        self.case_sensitive = case_sensitive
        self._last_result: Optional[SearchResult] = None

    @property
    def last_result(self) -> Optional[SearchResult]:
        """Result of the most recent successful search, if any."""
        return self._last_result

    def search(self, root_path: Optional[str], target_names: Optional[Iterable[str]],
               case_sensitive: Optional[bool] = None) -> SearchResult:
        """
        Search a directory tree for files with the given names.

        Args:
            root_path: Directory to search from
            target_names: File base names to look for
            case_sensitive: Overrides the instance default for this call

        Returns:
            SearchResult with an entry (possibly empty) for every target name

        Raises:
            InvalidArgumentError: If the path or names are missing, or the path is not a directory
            NotFoundError: If the root directory does not exist
        """
        self._last_result = None
        request = self._build_request(root_path, target_names, case_sensitive)

        root = request.get_root_path()
        if not root.exists():
            raise NotFoundError(f"Directory does not exist: {request.root}")

        if not root.is_dir():
            raise InvalidArgumentError(f"Path is not a directory: {request.root}")

        logger.info(f"Searching {root} for {len(request.targets)} name(s), "
                    f"case_sensitive={request.case_sensitive}")

        matches: Dict[str, List[str]] = {name: [] for name in request.targets}
        errors: List[str] = []
        stats = {'directories_traversed': 0, 'entries_scanned': 0}

        self._walk(str(root), request, matches, errors, stats)

        result = SearchResult(
            root=str(root),
            case_sensitive=request.case_sensitive,
            matches={name: tuple(paths) for name, paths in matches.items()},
            errors=tuple(errors),
            **stats
        )
        logger.info(f"Search finished: {result}")

        self._last_result = result
        return result

    def get_file_count(self, file_name: str) -> int:
        """
        Get the number of occurrences found for a name in the last search.

        Args:
            file_name: Target name as passed to ``search``

        Returns:
            Occurrence count, 0 if the name was not searched for
        """
        if self._last_result is None:
            return 0
        return self._last_result.get_count(file_name)

    def _build_request(self, root_path, target_names, case_sensitive) -> SearchRequest:
        """
        Validate raw arguments into a SearchRequest.

        Raises:
            InvalidArgumentError: If any argument is missing or malformed
        """
        if root_path is None:
            raise InvalidArgumentError("Directory path cannot be null or empty")
        if target_names is None:
            raise InvalidArgumentError("File names list cannot be null or empty")
        if isinstance(target_names, str):
            target_names = [target_names]

        try:
            return SearchRequest(
                root=str(root_path),
                targets=list(target_names),
                case_sensitive=self.case_sensitive if case_sensitive is None else case_sensitive
            )
        except ValidationError as e:
            messages = "; ".join(error['msg'] for error in e.errors())
            raise InvalidArgumentError(messages) from e

    def _walk(self, root: str, request: SearchRequest, matches: Dict[str, List[str]],
              errors: List[str], stats: Dict[str, int]) -> None:
        """
        Walk the tree below ``root`` in depth-first pre-order.

        An explicit stack replaces recursion so that very deep trees are not
        bounded by the interpreter's recursion limit. Children are pushed in
        reverse name order, so entries are visited exactly as a recursive
        walk over sorted listings would visit them.

        Args:
            root: Absolute path of the root directory
            request: Validated search request
            matches: Per-name path lists, filled in place
            errors: Error messages, filled in place
            stats: Traversal counters, updated in place
        """
        targets = self._prepare_targets(request)
        stack = list(reversed(self._list_directory(root, errors, stats)))

        while stack:
            entry = stack.pop()
            stats['entries_scanned'] += 1

            try:
                if entry.is_symlink():
                    logger.debug(f"Skipping symbolic link: {entry.path}")
                    continue

                key = entry.name if request.case_sensitive else entry.name.casefold()
                for name, target_key in targets:
                    if key == target_key:
                        matches[name].append(os.path.abspath(entry.path))

                is_directory = entry.is_dir(follow_symlinks=False)
            except OSError as e:
                self._record_error(f"Access denied: {entry.path}", e, errors)
                continue

            if is_directory:
                stack.extend(reversed(self._list_directory(entry.path, errors, stats)))

    def _list_directory(self, path: str, errors: List[str], stats: Dict[str, int]) -> List[os.DirEntry]:
        """
        List a directory's entries sorted by name.

        Returns:
            Sorted entries, or an empty list if the directory cannot be read
        """
        try:
            with os.scandir(path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._record_error(f"Cannot access directory: {path}", e, errors)
            return []

        stats['directories_traversed'] += 1
        return entries

    def _prepare_targets(self, request: SearchRequest) -> List[Tuple[str, str]]:
        """Pair each target name with the key it is compared by."""
        if request.case_sensitive:
            return [(name, name) for name in request.targets]
        return [(name, name.casefold()) for name in request.targets]

    def _record_error(self, message: str, error: OSError, errors: List[str]) -> None:
        logger.warning(f"{message} ({error})")
        errors.append(f"{message}: {error.strerror or error}")


def search_files(root_path: str, target_names: Iterable[str], case_sensitive: bool = True) -> SearchResult:
    """
    Convenience function to run a single search.

    Args:
        root_path: Directory to search from
        target_names: File base names to look for
        case_sensitive: Whether names must match exactly

    Returns:
        SearchResult for the search
    """
    return FileSearcher(case_sensitive=case_sensitive).search(root_path, target_names)
