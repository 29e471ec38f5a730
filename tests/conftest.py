from __future__ import annotations

import pytest

from app import create_app
from run_controller import RunController
from settings import Settings
from storage import DashboardStore


class FakeTimer:
    """Stands in for threading.Timer; fires only when a test says so."""

    def __init__(self, interval, function, args=None, kwargs=None):
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.kwargs = kwargs or {}
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self):
        self.started = True

    def cancel(self):
        self.cancelled = True

    def fire(self):
        # what the timer thread would do once the interval elapses
        self.function(*self.args, **self.kwargs)


class TimerRecorder:
    def __init__(self):
        self.timers = []

    def __call__(self, interval, function, args=None, kwargs=None):
        timer = FakeTimer(interval, function, args, kwargs)
        self.timers.append(timer)
        return timer

    @property
    def last(self) -> FakeTimer:
        return self.timers[-1]


@pytest.fixture
def timers():
    return TimerRecorder()


@pytest.fixture
def store():
    return DashboardStore()


@pytest.fixture
def idle_store():
    return DashboardStore(initial_status="idle")


@pytest.fixture
def controller(idle_store, timers):
    return RunController(idle_store, completion_delay=3.0, timer_factory=timers)


@pytest.fixture
def client(controller):
    app = create_app(settings=Settings(), controller=controller)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def valid_config():
    return {"ansatz": "uccsd", "optimizer": "cobyla", "layers": 4, "stepSize": 0.01}
