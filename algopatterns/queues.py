"""Queue problems: sliding request counter and ticket line timing."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence


class RecentCounter:
    """Counts requests made within the last 3000 milliseconds."""

    WINDOW = 3000

    def __init__(self) -> None:
        self._times: deque[int] = deque()

    def ping(self, t: int) -> int:
        """Record a request at time t and return the requests in [t - 3000, t]."""
        while self._times and t > self._times[0] + self.WINDOW:
            self._times.popleft()
        self._times.append(t)
        return len(self._times)


def time_required_to_buy(tickets: Sequence[int], k: int) -> int:
    """Seconds until the person at position k has bought all their tickets."""
    if not 0 <= k < len(tickets):
        raise IndexError("k is outside the line")
    wanted = tickets[k]
    ahead = sum(min(count, wanted) for count in tickets[: k + 1])
    behind = sum(min(count, wanted - 1) for count in tickets[k + 1 :])
    return ahead + behind