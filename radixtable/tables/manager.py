# radixtable/tables/manager.py
from pathlib import Path
from typing import Any, List, Optional, Tuple
from radixtable.config import CONFIG
from radixtable.logging import get_logger, LogTemplates
from radixtable.tables.metadata import TableData
from radixtable.utils.files import FileOperationError
from radixtable.utils.trie import RadixTree

logger = get_logger("tables.manager")

class TableManager:
    """Manages a prefix table using a radix tree with persistence."""

    def __init__(self, path: Optional[Path] = None):
        self.path = Path(path) if path else CONFIG.table_file
        self.tree = RadixTree[Tuple[str, Any]]()
        self.data = TableData.load(self.path)
        self._load_to_tree()

    def _load_to_tree(self) -> None:
        """Load table entries into the tree."""
        for key, value in self.data.entries.items():
            self.tree.insert(key, (key, value))
        logger.debug(LogTemplates.TABLE_LOADED.format(path=self.path, count=len(self.data.entries)))

    def _save(self) -> None:
        self.data.save(self.path)
        logger.debug(LogTemplates.TABLE_SAVED.format(path=self.path, count=len(self.data.entries)))

    def _commit(self, entries: dict) -> None:
        """Persist `entries`; the in-memory table only changes if the write succeeds."""
        previous, self.data.entries = self.data.entries, entries
        try:
            self._save()
        except FileOperationError:
            self.data.entries = previous
            raise

    def add(self, key: str, value: Any) -> int:
        """Add or overwrite an entry, return its depth in the tree."""
        self._commit({**self.data.entries, key: value})
        depth = self.tree.insert(key, (key, value))
        logger.info(LogTemplates.ENTRY_ADDED.format(key=key, depth=depth))
        return depth

    def remove(self, key: str) -> bool:
        """Remove an entry, return True if it was stored."""
        if key not in self.tree:
            logger.info(LogTemplates.ENTRY_MISSING.format(key=key))
            return False
        self._commit({k: v for k, v in self.data.entries.items() if k != key})
        depth, _ = self.tree.delete(key)
        logger.info(LogTemplates.ENTRY_REMOVED.format(key=key, depth=depth))
        return True

    def get(self, key: str, default: Any = None) -> Any:
        """Exact lookup of a key's value."""
        found = self.tree.match(key)
        return found[1] if found is not None else default

    def lookup(self, key: str) -> Optional[Tuple[str, Any]]:
        """Longest-prefix lookup, return (matched key, value) or None."""
        return self.tree.match_longest(key)

    def list_entries(self) -> List[Tuple[str, Any]]:
        """List all entries in tree order."""
        return [entry for _, entry in self.tree.items()]
