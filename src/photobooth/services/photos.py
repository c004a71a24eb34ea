"""In-memory photo store with a separate image payload mapping."""

import logging
from dataclasses import dataclass, field, replace
from uuid import UUID, uuid4

from photobooth.domain.modes import ModeKey
from photobooth.domain.photos import PhotoRecord, PhotoStatus

logger = logging.getLogger(__name__)


@dataclass
class ImagePayloadStore:
    """Raw input and output bytes keyed by photo id."""

    inputs: dict[UUID, bytes] = field(default_factory=dict)
    outputs: dict[UUID, bytes] = field(default_factory=dict)

    def purge(self, photo_id: UUID) -> None:
        """Drop both payloads for a photo."""
        self.inputs.pop(photo_id, None)
        self.outputs.pop(photo_id, None)


@dataclass
class PhotoStore:
    """Newest-first sequence of photo records.

    Only the owning event loop may call the mutating methods. Records are
    replaced, never edited, so snapshots returned by ``list`` stay stable.
    """

    payloads: ImagePayloadStore = field(default_factory=ImagePayloadStore)
    _records: list[PhotoRecord] = field(default_factory=list, repr=False)

    def __len__(self) -> int:
        return len(self._records)

    def capture(self, input_bytes: bytes, mode: ModeKey) -> UUID:
        """Store a new frame as a busy record at the front and return its id."""
        photo_id = uuid4()
        while photo_id in self.payloads.inputs:
            photo_id = uuid4()
        self.payloads.inputs[photo_id] = input_bytes
        self._records.insert(0, PhotoRecord(id=photo_id, mode=ModeKey(mode)))
        return photo_id

    def complete(self, photo_id: UUID, output_bytes: bytes) -> PhotoRecord | None:
        """Attach the transformed output and mark the record done."""
        index = self._index_of(photo_id)
        if index is None:
            logger.debug(
                "Discarding output for removed photo", extra={"photo_id": photo_id}
            )
            return None
        record = self._records[index]
        if not record.is_busy:
            return _already_resolved(record)
        self.payloads.outputs[photo_id] = output_bytes
        return self._replace(index, PhotoStatus.DONE, error=None)

    def fail(
        self, photo_id: UUID, reason: str = "Transformation failed"
    ) -> PhotoRecord | None:
        """Mark the record as terminally failed without output."""
        index = self._index_of(photo_id)
        if index is None:
            logger.debug(
                "Discarding failure for removed photo", extra={"photo_id": photo_id}
            )
            return None
        record = self._records[index]
        if not record.is_busy:
            return _already_resolved(record)
        return self._replace(index, PhotoStatus.FAILED, error=reason)

    def remove(self, photo_id: UUID) -> bool:
        """Delete a record and its payloads regardless of status."""
        index = self._index_of(photo_id)
        self.payloads.purge(photo_id)
        if index is None:
            return False
        del self._records[index]
        return True

    def list(self) -> tuple[PhotoRecord, ...]:
        """Return a snapshot of the records, newest first."""
        return tuple(self._records)

    def get(self, photo_id: UUID) -> PhotoRecord | None:
        index = self._index_of(photo_id)
        return None if index is None else self._records[index]

    def get_input(self, photo_id: UUID) -> bytes | None:
        return self.payloads.inputs.get(photo_id)

    def get_output(self, photo_id: UUID) -> bytes | None:
        return self.payloads.outputs.get(photo_id)

    def _index_of(self, photo_id: UUID) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == photo_id:
                return index
        return None

    def _replace(
        self, index: int, status: PhotoStatus, error: str | None
    ) -> PhotoRecord:
        updated = replace(self._records[index], status=status, error=error)
        self._records[index] = updated
        return updated


def _already_resolved(record: PhotoRecord) -> PhotoRecord:
    """A photo resolves once; later outcomes are ignored."""
    logger.warning(
        "Photo already resolved",
        extra={"photo_id": record.id, "status": record.status},
    )
    return record
