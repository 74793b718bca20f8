"""Tests for engine/pool.py — bounded resource pool with timed acquire.

Covers:
  - Capacity invariant: available + held == capacity at every step
  - Release makes exactly one more unit available, with the same identity
  - Timeout returns None and withdraws the request (no resource is swallowed)
  - Waiters are woken by release
  - Misuse (double release, foreign release) fails fast
  - Empty pools
"""

from __future__ import annotations

import pytest
import simpy

from fuelstation_sim.config import FuelType, TimeRange
from fuelstation_sim.engine.entities import CashRegister, Station
from fuelstation_sim.engine.pool import PoolMisuseError, ResourcePool


def _stations(n: int) -> list[Station]:
    return [Station(id=i, fuel=FuelType.GAS, fueling_time=TimeRange(min=1, max=2)) for i in range(n)]


def _acquire(pool: ResourcePool, out: list, timeout: float | None = None, hold: float = 0.0):
    """Process: acquire, record (time, resource), optionally hold then release."""
    resource = yield from pool.acquire(timeout)
    out.append((pool._env.now, resource))
    if resource is not None and hold > 0:
        yield pool._env.timeout(hold)
        pool.release(resource)


def _assert_invariant(pool: ResourcePool):
    assert pool.available_count + pool.held_count == pool.capacity


# ═══════════════════════════════════════════════════════════════════════════
# Acquire / release
# ═══════════════════════════════════════════════════════════════════════════

class TestAcquireRelease:

    def test_starts_full(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(3), name="gas")
        assert pool.capacity == 3
        assert pool.available_count == 3
        assert pool.held_count == 0

    def test_acquire_returns_pooled_resource(self, env: simpy.Environment):
        stations = _stations(2)
        pool = ResourcePool(env, stations)
        got: list = []
        env.process(_acquire(pool, got))
        env.run()
        assert got[0][1] in stations
        assert pool.held_count == 1
        _assert_invariant(pool)

    def test_release_returns_exactly_one_unit(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(2))
        got: list = []
        env.process(_acquire(pool, got))
        env.run()
        before = pool.available_count
        pool.release(got[0][1])
        env.run()
        assert pool.available_count == before + 1
        _assert_invariant(pool)

    def test_reacquire_yields_same_identity(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(1))
        first: list = []
        env.process(_acquire(pool, first))
        env.run()
        pool.release(first[0][1])
        second: list = []
        env.process(_acquire(pool, second))
        env.run()
        assert second[0][1] == first[0][1]
        assert second[0][1].fuel is FuelType.GAS

    def test_waiter_woken_by_release(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(1))
        got: list = []
        env.process(_acquire(pool, got, hold=2.0))
        env.process(_acquire(pool, got, timeout=10.0))
        env.run()
        assert [t for t, _ in got] == [0, 2.0]
        assert got[1][1] is not None

    def test_invariant_holds_under_contention(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(2))
        got: list = []
        for _ in range(6):
            env.process(_acquire(pool, got, timeout=3.0, hold=1.0))

        def observer():
            while env.now < 5:
                _assert_invariant(pool)
                yield env.timeout(0.25)

        env.process(observer())
        env.run()
        _assert_invariant(pool)
        assert pool.available_count == 2
        assert sum(1 for _, r in got if r is not None) == 6


# ═══════════════════════════════════════════════════════════════════════════
# Timeouts
# ═══════════════════════════════════════════════════════════════════════════

class TestTimeout:

    def test_timeout_returns_none(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(1))
        got: list = []
        env.process(_acquire(pool, got, hold=10.0))
        env.process(_acquire(pool, got, timeout=0.5))
        env.run(until=1.0)
        assert got[1] == (0.5, None)

    def test_timed_out_request_is_withdrawn(self, env: simpy.Environment):
        pool = ResourcePool(env, _stations(1))
        got: list = []
        env.process(_acquire(pool, got, hold=2.0))
        env.process(_acquire(pool, got, timeout=0.5))
        env.run()
        # The abandoned request must not have consumed the released pump.
        assert pool.available_count == 1
        assert pool.held_count == 0
        assert len(pool.get_queue) == 0

    def test_empty_pool_always_times_out(self, env: simpy.Environment):
        pool = ResourcePool(env, [], name="none")
        assert pool.capacity == 0
        got: list = []
        env.process(_acquire(pool, got, timeout=1.0))
        env.run()
        assert got == [(1.0, None)]
        _assert_invariant(pool)


# ═══════════════════════════════════════════════════════════════════════════
# Misuse
# ═══════════════════════════════════════════════════════════════════════════

class TestMisuse:

    def test_double_release_raises(self, env: simpy.Environment):
        pool = ResourcePool(env, [CashRegister(0)])
        register = pool.get().value
        pool.release(register)
        with pytest.raises(PoolMisuseError):
            pool.release(register)

    def test_release_of_never_acquired_raises(self, env: simpy.Environment):
        pool = ResourcePool(env, [CashRegister(0)])
        with pytest.raises(PoolMisuseError):
            pool.release(CashRegister(0))

    def test_release_to_wrong_pool_raises(self, env: simpy.Environment):
        a = ResourcePool(env, [CashRegister(0)], name="a")
        b = ResourcePool(env, [CashRegister(1)], name="b")
        register = a.get().value
        with pytest.raises(PoolMisuseError, match="pool b"):
            b.release(register)
        _assert_invariant(a)
        _assert_invariant(b)
