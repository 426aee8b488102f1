"""File-backed object cache for loaded records."""

import json
from datetime import datetime
from pathlib import Path

from slug_guard.models.records import PostRecord
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


class PostCache:
    """Caches one JSON file per record, keyed by record ID."""

    def __init__(self, cache_dir: Path | str = ".slug-guard-cache") -> None:
        """
        Initialize the record cache.

        Args:
            cache_dir: Base directory for cache storage
        """
        self.cache_dir = Path(cache_dir)
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        logger.debug("Post cache initialized", cache_dir=str(self.cache_dir))

    def _get_cache_path(self, post_id: int) -> Path:
        return self.cache_dir / f"post-{post_id}.json"

    def save(self, record: PostRecord) -> None:
        """
        Store a copy of a record.

        Args:
            record: Record to cache
        """
        cache_path = self._get_cache_path(record.id)
        cache_content = {
            "data": record.model_dump(mode="json"),
            "cached_at": datetime.now().isoformat(),
        }
        cache_path.write_text(json.dumps(cache_content, indent=2))
        logger.debug("Cache saved", post_id=record.id)

    def load(self, post_id: int) -> PostRecord | None:
        """
        Load a cached record.

        Args:
            post_id: Record ID

        Returns:
            Cached record, or None on a miss or an unreadable entry
        """
        cache_path = self._get_cache_path(post_id)

        if not cache_path.exists():
            logger.debug("Cache miss", post_id=post_id)
            return None

        try:
            cache_content = json.loads(cache_path.read_text())
            return PostRecord.model_validate(cache_content["data"])
        except Exception as e:
            logger.warning("Discarding unreadable cache entry", post_id=post_id, error=str(e))
            cache_path.unlink(missing_ok=True)
            return None

    def exists(self, post_id: int) -> bool:
        """Check if a record is cached."""
        return self._get_cache_path(post_id).exists()

    def delete(self, post_id: int) -> bool:
        """
        Evict a record from the cache.

        Args:
            post_id: Record ID

        Returns:
            True if an entry was removed
        """
        cache_path = self._get_cache_path(post_id)

        if cache_path.exists():
            cache_path.unlink()
            logger.debug("Cache entry deleted", post_id=post_id)
            return True

        logger.debug("Cache entry not found for deletion", post_id=post_id)
        return False

    def list_all(self) -> list[int]:
        """
        List cached record IDs.

        Returns:
            Sorted record IDs
        """
        return sorted(int(p.stem.removeprefix("post-")) for p in self.cache_dir.glob("post-*.json"))
