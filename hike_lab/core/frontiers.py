# hike_lab/core/frontiers.py
# Work containers shared by the graph builder (FIFO) and the path searcher (LIFO).
from __future__ import annotations
from collections import deque


class FIFOQueue:
    def __init__(self, items=()):
        self.q = deque(items)
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def peek(self): return self.q[0]


class LIFOStack:
    def __init__(self, items=()):
        self.q = list(items)
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def peek(self): return self.q[-1]
