"""Tests for StatementIdAllocator."""

from resourcedb.storage import StatementIdAllocator


def test_allocates_from_zero():
    allocator = StatementIdAllocator()

    assert [allocator.allocate() for _ in range(3)] == [0, 1, 2]
    assert allocator.peek() == 3


def test_is_allocated():
    allocator = StatementIdAllocator()
    allocator.allocate()

    assert allocator.is_allocated(0)
    assert not allocator.is_allocated(1)
    assert not allocator.is_allocated(-1)


def test_reset_starts_over():
    allocator = StatementIdAllocator()
    allocator.allocate()
    allocator.allocate()
    allocator.reset()

    assert not allocator.is_allocated(0)
    assert allocator.allocate() == 0
