"""JSON-file backed record store used by the local platform and the CLI."""

import json
from datetime import datetime
from pathlib import Path

from pydantic import ValidationError

from slug_guard.exceptions import StorageError
from slug_guard.models.records import PostRecord
from slug_guard.utils.logging import get_logger

logger = get_logger(__name__)


class PostStore:
    """Row store for content records, keyed by record ID.

    Rows are handed out as copies, the same way a database query returns
    fresh objects; writes go through ``insert`` and ``update_slug``.
    """

    def __init__(
        self, records: list[PostRecord] | None = None, path: Path | str | None = None
    ) -> None:
        self.path = Path(path) if path is not None else None
        self._rows: dict[int, PostRecord] = {}
        for record in records or []:
            self._rows[record.id] = record.model_copy()

    @classmethod
    def load(cls, path: Path | str) -> "PostStore":
        """
        Load records from a JSON file.

        The file holds either a list of records or ``{"records": [...]}``.

        Args:
            path: Path to the record file

        Returns:
            PostStore bound to the file

        Raises:
            StorageError: If the file is missing, not JSON, or holds invalid records
        """
        file_path = Path(path)

        if not file_path.exists():
            logger.error("Record file not found", path=str(file_path))
            raise StorageError(f"Record file not found: {file_path}", path=str(file_path))

        try:
            content = json.loads(file_path.read_text())
            rows = content["records"] if isinstance(content, dict) else content
            records = [PostRecord.model_validate(row) for row in rows]
        except (json.JSONDecodeError, KeyError, TypeError) as e:
            logger.error("Malformed record file", path=str(file_path), error=str(e))
            raise StorageError(f"Malformed record file {file_path}: {e}", path=str(file_path)) from e
        except ValidationError as e:
            logger.error("Invalid record in file", path=str(file_path), error=str(e))
            raise StorageError(f"Invalid record in {file_path}: {e}", path=str(file_path)) from e

        logger.info("Records loaded", path=str(file_path), count=len(records))
        return cls(records, path=file_path)

    def save(self, path: Path | str | None = None) -> None:
        """
        Write all rows back to JSON.

        Args:
            path: Target file, defaults to the file the store was loaded from
        """
        target = Path(path) if path is not None else self.path
        if target is None:
            raise StorageError("No file to save records to")

        content = {
            "records": [row.model_dump(mode="json") for row in self._rows.values()],
            "updated_at": datetime.now().isoformat(),
        }
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(content, indent=2, ensure_ascii=False))
        logger.info("Records saved", path=str(target), count=len(self._rows))

    def next_id(self) -> int:
        """ID for the next inserted record."""
        return max(self._rows, default=0) + 1

    def insert(self, record: PostRecord) -> None:
        """Insert or replace a row."""
        self._rows[record.id] = record.model_copy()

    def get(self, post_id: int) -> PostRecord | None:
        """Fetch a copy of one row."""
        row = self._rows.get(post_id)
        return row.model_copy() if row is not None else None

    def ids(self, post_type: str | None = None) -> list[int]:
        """Row IDs in ascending order, optionally filtered by type."""
        return sorted(
            post_id
            for post_id, row in self._rows.items()
            if post_type is None or row.type == post_type
        )

    def query(self, post_type: str | None = None) -> list[PostRecord]:
        """Fetch copies of all rows of a type (or all rows) in ID order."""
        return [self._rows[post_id].model_copy() for post_id in self.ids(post_type)]

    def siblings(self, post_type: str, parent_id: int, exclude_id: int = 0) -> set[str]:
        """
        Slugs already used by records sharing a type and parent.

        Args:
            post_type: Content type tag
            parent_id: Parent record ID
            exclude_id: Record to leave out (the one being slugged)

        Returns:
            Set of non-empty sibling slugs
        """
        return {
            row.slug
            for row in self._rows.values()
            if row.type == post_type
            and row.parent_id == parent_id
            and row.id != exclude_id
            and row.slug
        }

    def update_slug(self, post_id: int, slug: str) -> int:
        """
        Write the slug column of one row.

        Args:
            post_id: Record ID
            slug: New slug

        Returns:
            Number of rows changed (0 when the ID is unknown or the slug is unchanged)
        """
        row = self._rows.get(post_id)
        if row is None:
            logger.warning("Slug update for unknown record", post_id=post_id)
            return 0
        if row.slug == slug:
            return 0
        row.slug = slug
        return 1

    def __len__(self) -> int:
        return len(self._rows)
