import heapq


class _Entry:
    # Compares through the heap's key on every comparison; nothing is cached.
    __slots__ = ("item", "key")

    def __init__(self, item, key):
        self.item = item
        self.key = key

    def __lt__(self, other):
        return self.key(self.item) < other.key(other.item)


class BinaryHeap:
    """Min-heap of arbitrary items ordered by key(item).

    The key is evaluated whenever two items are compared during push or pop,
    so an item's key must not change while it sits in the heap. Items with
    equal keys come out in no particular order.
    """

    def __init__(self, key):
        self.key = key
        self.h = []

    def push(self, item):
        heapq.heappush(self.h, _Entry(item, self.key))

    def pop(self):
        if not self.h:
            raise IndexError("pop from an empty heap")
        return heapq.heappop(self.h).item

    def peek(self):
        if not self.h:
            raise IndexError("peek at an empty heap")
        return self.h[0].item

    def clear(self):
        self.h.clear()

    def __len__(self):
        return len(self.h)

    def __bool__(self):
        return bool(self.h)
