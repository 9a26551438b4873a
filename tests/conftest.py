import random

import pytest

from shooter.engine import SimulationEngine
from shooter.entities import Enemy
from shooter.loop import FrameLoop
from shooter.spawner import Spawner


class FakeScheduler:
    """Stands in for the host's animation-frame API"""

    def __init__(self):
        self.pending = {}
        self.cancelled = []
        self._next = 0

    def request(self, callback):
        self._next += 1
        self.pending[self._next] = callback
        return self._next

    def cancel(self, handle):
        self.cancelled.append(handle)
        self.pending.pop(handle, None)

    def pump(self):
        """Run every callback due this frame"""
        due, self.pending = self.pending, {}
        for callback in due.values():
            callback()
        return len(due)


class RecordingSurface:
    """Surface that records draw calls instead of drawing"""

    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        if name in ("clear", "circle", "ellipse", "polygon", "rect", "text"):
            return lambda *args, **kwargs: self.calls.append((name, args, kwargs))
        raise AttributeError(name)

    def texts(self):
        return [args[0] for name, args, _ in self.calls if name == "text"]

    def count(self, name):
        return sum(1 for call in self.calls if call[0] == name)


def make_enemy(x, y, radius=20.0, speed=0.0, sway=0.0, variant="saucer"):
    return Enemy(x=x, y=y, radius=radius, speed=speed, sway=sway, variant=variant)


@pytest.fixture
def engine():
    eng = SimulationEngine(spawner=Spawner(rng=random.Random(1234)))
    eng.start()
    return eng


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def frame_loop(scheduler):
    return FrameLoop(scheduler.request, scheduler.cancel)


@pytest.fixture
def surface():
    return RecordingSurface()
