"""In-Memory Store — dict-backed KeyValueStore for tests and single-process runs.

Invariants:
    - values() returns records ordered by key (same contract as the SQL store)
    - Stored and returned dicts are deep copies: callers never alias store contents

Design Decisions:
    - Deep copy on both insert and read: mirrors serialize-on-write of a real store,
      so a caller mutating a returned dict cannot corrupt the ledger
"""

import copy


class InMemoryStore:
    """Ordered key-value map held in process memory."""

    def __init__(self, name: str = "memory"):
        self.name = name
        self._data: dict[str, dict] = {}

    async def get(self, key: str) -> dict | None:
        value = self._data.get(key)
        return copy.deepcopy(value) if value is not None else None

    async def insert(self, key: str, value: dict) -> None:
        self._data[key] = copy.deepcopy(value)

    async def contains(self, key: str) -> bool:
        return key in self._data

    async def values(self) -> list[dict]:
        return [copy.deepcopy(self._data[k]) for k in sorted(self._data)]

    async def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        return len(self._data)
