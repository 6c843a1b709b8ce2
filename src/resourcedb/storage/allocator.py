"""Statement id allocation service.

StatementIdAllocator is a stateful service that hands out dense statement ids.
"""

from __future__ import annotations


class StatementIdAllocator:
    """Allocates sequential statement ids starting at 0.

    Ids are never recycled: statements are not individually removed, so an
    id always equals the statement's position in its store. Only reset()
    starts over, invalidating every id handed out before it.
    """

    def __init__(self) -> None:
        self._next_id = 0

    def allocate(self) -> int:
        """Allocate the next id.

        Returns:
            Newly allocated id, one greater than the previous one.
        """
        statement_id = self._next_id
        self._next_id += 1
        return statement_id

    def peek(self) -> int:
        """Id the next allocate() call will return."""
        return self._next_id

    def is_allocated(self, statement_id: int) -> bool:
        """Check if an id has been handed out since the last reset.

        Args:
            statement_id: Id to check.

        Returns:
            True if 0 <= statement_id < number of allocated ids.
        """
        return 0 <= statement_id < self._next_id

    def reset(self) -> None:
        """Start allocating from 0 again."""
        self._next_id = 0
