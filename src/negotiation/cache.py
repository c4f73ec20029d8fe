"""
Per-vendor cache of normalized negotiation statistics

Entries live in memory and, when a storage directory is configured, are
also written to one JSON file per vendor so they survive a restart:
<storage_dir>/vendor_<vendor_id>_statistics.json

Files are written via a temporary file and then replaced. Unreadable files
found while loading are skipped with a warning.
"""
from __future__ import annotations

import json
import re
import threading
from pathlib import Path
from typing import Dict, Optional

from pydantic import ValidationError

from config import get_logger
from src.core import InvalidInputError, NegotiationMetadata, StatisticsCacheError

logger = get_logger("negotiation.cache")

_FILE_PREFIX = "vendor_"
_FILE_SUFFIX = "_statistics.json"
# Vendor ids become file names, so keep them to a safe alphabet
_SAFE_VENDOR_ID = re.compile(r"^[A-Za-z0-9_.\-]+$")


class StatisticsCache:
    """
    Thread-safe vendor_id -> NegotiationMetadata store with optional durable storage

    Attributes:
        storage_dir: Directory for persisted entries, or None for memory only
    """

    def __init__(self, storage_dir: Optional[Path] = None) -> None:
        self.storage_dir = Path(storage_dir) if storage_dir is not None else None
        self._entries: Dict[str, NegotiationMetadata] = {}
        self._lock = threading.Lock()

        if self.storage_dir is not None:
            try:
                self.storage_dir.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise StatisticsCacheError(
                    message=f"Cannot create statistics cache directory: {self.storage_dir}"
                ) from e

    def _path_for(self, vendor_id: str) -> Path:
        if not _SAFE_VENDOR_ID.match(vendor_id):
            raise InvalidInputError(message=f"Vendor id cannot be used as a cache key: {vendor_id!r}")
        return self.storage_dir / f"{_FILE_PREFIX}{vendor_id}{_FILE_SUFFIX}"

    def load_from_storage(self) -> int:
        """
        Load every persisted entry into memory

        Returns:
            Number of entries loaded
        """
        if self.storage_dir is None:
            return 0

        loaded = 0
        for path in sorted(self.storage_dir.glob(f"{_FILE_PREFIX}*{_FILE_SUFFIX}")):
            vendor_id = path.name[len(_FILE_PREFIX):-len(_FILE_SUFFIX)]
            if not vendor_id:
                continue
            try:
                data = json.loads(path.read_text(encoding="utf-8"))
                metadata = NegotiationMetadata.model_validate(data)
            except (OSError, ValueError, ValidationError) as e:
                logger.warning(f"Failed to parse cached statistics for {vendor_id}: {e!r}")
                continue
            with self._lock:
                self._entries[vendor_id] = metadata
            loaded += 1

        logger.info(f"Loaded {loaded} cached statistics from storage")
        return loaded

    def _persist(self, vendor_id: str, metadata: NegotiationMetadata) -> None:
        path = self._path_for(vendor_id)
        tmp = path.with_suffix(path.suffix + ".tmp")
        try:
            tmp.write_text(
                json.dumps(metadata.to_json_dict(), ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
            tmp.replace(path)
        except OSError as e:
            logger.warning(f"Failed to persist statistics for vendor {vendor_id}: {e!r}")

    def put(self, vendor_id: str, metadata: NegotiationMetadata) -> None:
        """Store an entry in memory and, if configured, on disk"""
        if self.storage_dir is not None:
            self._persist(vendor_id, metadata)
        with self._lock:
            self._entries[vendor_id] = metadata

    def get(self, vendor_id: str) -> Optional[NegotiationMetadata]:
        with self._lock:
            return self._entries.get(vendor_id)

    def has(self, vendor_id: str) -> bool:
        with self._lock:
            return vendor_id in self._entries

    def get_all(self) -> Dict[str, NegotiationMetadata]:
        """Snapshot of all entries"""
        with self._lock:
            return dict(self._entries)

    def clear(self, purge_storage: bool = False) -> None:
        """
        Drop all in-memory entries

        Args:
            purge_storage: Also delete the persisted files
        """
        with self._lock:
            self._entries.clear()

        if purge_storage and self.storage_dir is not None:
            for path in self.storage_dir.glob(f"{_FILE_PREFIX}*{_FILE_SUFFIX}"):
                path.unlink(missing_ok=True)

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
