"""Index-aligned collection of probe records for a single run."""

from collections.abc import Iterator, Sequence

from latency_check.models.outcome import ProbeRecord


class SlotAlreadyFilledError(Exception):
    """Raised when a record is written to a slot that already holds one."""


class ResultSetSealedError(Exception):
    """Raised when a record is written after the run has completed."""


class ResultSet:
    """One slot per target index, each filled at most once.

    Empty slots are targets whose probe is still in flight. Once the run
    completes the set is sealed and becomes read-only.
    """

    def __init__(self, size: int) -> None:
        self._slots: list[ProbeRecord | None] = [None] * size
        self._sealed = False

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ProbeRecord | None]:
        return iter(self._slots)

    def __getitem__(self, index: int) -> ProbeRecord | None:
        return self._slots[index]

    @property
    def sealed(self) -> bool:
        """Whether the set no longer accepts records."""
        return self._sealed

    @property
    def is_complete(self) -> bool:
        """Whether every slot holds a record."""
        return all(slot is not None for slot in self._slots)

    def record(self, probe_record: ProbeRecord) -> None:
        """Store a record in the slot matching its index.

        Raises:
            ResultSetSealedError: If the set has been sealed
            SlotAlreadyFilledError: If the slot already holds a record
            IndexError: If the record index is outside the set

        """
        if self._sealed:
            raise ResultSetSealedError(
                f"Cannot record target {probe_record.index}: result set is sealed"
            )
        if not 0 <= probe_record.index < len(self._slots):
            raise IndexError(
                f"Target index {probe_record.index} out of range "
                f"for {len(self._slots)} target(s)"
            )
        if self._slots[probe_record.index] is not None:
            raise SlotAlreadyFilledError(
                f"Target {probe_record.index} already has a recorded outcome"
            )
        self._slots[probe_record.index] = probe_record

    def seal(self) -> None:
        """Make the set read-only."""
        self._sealed = True

    def records(self) -> Sequence[ProbeRecord]:
        """Return the filled slots in target order."""
        return [slot for slot in self._slots if slot is not None]
