"""Resource pool — a bounded set of interchangeable pumps or registers.

Built on :class:`simpy.Store`.  The pool starts full; a resource leaves it
through ``get()``/``acquire()`` and returns through ``release()``.  Because
``release`` only accepts resources the pool handed out, the number in
circulation (available + held) equals ``capacity`` for the pool's lifetime.

Waiting requests are served in arrival order, but callers must not rely on
any fairness between them.
"""

from __future__ import annotations

from typing import Hashable, Iterable

import simpy


class PoolMisuseError(RuntimeError):
    """A resource was released twice, or released to a pool that never lent it."""


class ResourcePool(simpy.Store):
    """Fixed-capacity pool with timed acquisition.

    Usage inside a process::

        station = yield from pool.acquire(timeout=car.patience)
        if station is None:
            ...  # gave up
        ...
        pool.release(station)
    """

    def __init__(self, env: simpy.Environment, resources: Iterable[Hashable], name: str = "") -> None:
        resources = list(resources)
        # simpy rejects a zero-capacity store; an empty pool simply never yields.
        super().__init__(env, capacity=max(len(resources), 1))
        self.name = name
        self._size = len(resources)
        self._held: set[Hashable] = set()
        self.items.extend(resources)

    @property
    def capacity(self) -> int:
        return self._size

    @property
    def available_count(self) -> int:
        return len(self.items)

    @property
    def held_count(self) -> int:
        return len(self._held)

    def _do_get(self, event: simpy.resources.store.StoreGet) -> None:
        if self.items:
            resource = self.items.pop(0)
            self._held.add(resource)
            event.succeed(resource)
        return None

    def acquire(self, timeout: float | None = None):
        """Process generator: wait for a resource, at most ``timeout`` seconds.

        Returns the resource, or ``None`` when the deadline passed first.
        A resource handed over before the caller resumes is kept even if the
        deadline fired in the same instant; otherwise the request is withdrawn.
        """
        request = self.get()
        if timeout is None:
            resource = yield request
            return resource

        yield request | self._env.timeout(timeout)
        if request.triggered:
            return request.value
        request.cancel()
        return None

    def release(self, resource: Hashable) -> simpy.resources.store.StorePut:
        if resource not in self._held:
            raise PoolMisuseError(
                f"{resource!r} is not currently held from pool {self.name or id(self)}"
            )
        self._held.remove(resource)
        return self.put(resource)
