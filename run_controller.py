"""
Run lifecycle for the simulated VQE execution.

idle/completed/error --start--> running --(delay)--> completed
running --stop--> idle

No optimization actually runs. Starting a run flips the status and arms a
timer that marks the run completed after ``completion_delay`` seconds; stop
cancels that timer so it can't overwrite the idle state.
"""

from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Mapping, Union

from errors import RunConflictError
from schemas import RunAcknowledgement, RunConfig, RunStatus
from storage import DashboardStore

logger = logging.getLogger(__name__)

DEFAULT_COMPLETION_DELAY = 3.0  # seconds

TimerFactory = Callable[..., Any]


class RunController:
    def __init__(
        self,
        store: DashboardStore,
        completion_delay: float = DEFAULT_COMPLETION_DELAY,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        if completion_delay < 0:
            raise ValueError("completion_delay must be non-negative")
        self.store = store
        self.completion_delay = completion_delay
        self._timer_factory = timer_factory
        self._lock = threading.Lock()
        self._timer = None
        # bumped on every start/stop; a timer only fires for its own generation
        self._generation = 0

        # a store seeded as running still needs its completion armed
        if store.get_run_status() is RunStatus.RUNNING:
            self._generation += 1
            self._timer = self._schedule_completion(self._generation)

    @property
    def status(self) -> RunStatus:
        return self.store.get_run_status()

    @property
    def has_pending_completion(self) -> bool:
        with self._lock:
            return self._timer is not None

    def start(self, config: Union[RunConfig, Mapping[str, Any]]) -> RunAcknowledgement:
        """Begin a run. Raises pydantic.ValidationError or RunConflictError."""
        if not isinstance(config, RunConfig):
            config = RunConfig.model_validate(config)

        with self._lock:
            if self.store.get_run_status() is RunStatus.RUNNING:
                logger.warning("Rejected VQE start: a run is already in progress")
                raise RunConflictError("VQE execution is already running")

            self._generation += 1
            self.store.set_run_status(RunStatus.RUNNING)
            self._timer = self._schedule_completion(self._generation)

        logger.info(
            "VQE execution started (ansatz=%s, optimizer=%s, layers=%d, step_size=%g)",
            config.ansatz_id, config.optimizer_id, config.layer_count, config.step_size,
        )
        return RunAcknowledgement(message="VQE execution started", config=config)

    def stop(self) -> RunAcknowledgement:
        """Halt the current run, if any. Always succeeds."""
        with self._lock:
            previous = self.store.get_run_status()
            self._cancel_pending()
            self.store.set_run_status(RunStatus.IDLE)

        if previous is RunStatus.RUNNING:
            logger.info("VQE execution stopped")
        else:
            logger.debug("Stop requested while %s; nothing to cancel", previous.value)
        return RunAcknowledgement(message="VQE execution stopped")

    def shutdown(self) -> None:
        """Cancel any pending completion without touching the status."""
        with self._lock:
            self._cancel_pending()

    # -----------------------
    # internals
    # -----------------------
    def _schedule_completion(self, generation: int):
        timer = self._timer_factory(self.completion_delay, self._complete, args=(generation,))
        timer.daemon = True
        timer.start()
        return timer

    def _cancel_pending(self) -> None:
        self._generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _complete(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return
            self._timer = None
            if self.store.get_run_status() is not RunStatus.RUNNING:
                return
            self.store.set_run_status(RunStatus.COMPLETED)
        logger.info("VQE execution completed")
