"""A background worker thread with start, stop and restart support."""

from __future__ import annotations

import abc
import enum
import signal
import threading

from devcore.log import warn

__all__ = ["WorkerState", "Worker"]


class WorkerState(enum.Enum):
    """Life-cycle states of a worker thread."""

    STARTING = "starting"
    STARTED = "started"
    STOPPING = "stopping"
    STOPPED = "stopped"
    KILLING = "killing"


class Worker(abc.ABC):
    """Runs ``work_loop`` on its own thread; the thread survives stop/start cycles."""

    def __init__(self, name: str, exit_on_error: bool = False) -> None:
        self._name = name
        self._exit_on_error = exit_on_error
        self._work_lock = threading.Lock()
        self._cond = threading.Condition()
        self._state = WorkerState.STARTING
        self._thread: threading.Thread | None = None

    @property
    def name(self) -> str:
        """The worker's name, also used as its thread name."""
        return self._name

    @property
    def state(self) -> WorkerState:
        """The current life-cycle state."""
        with self._cond:
            return self._state

    def _compare_exchange(self, expected: WorkerState, new: WorkerState) -> bool:
        with self._cond:
            if self._state is not expected:
                return False
            self._state = new
            self._cond.notify_all()
            return True

    def _exchange(self, new: WorkerState) -> WorkerState:
        with self._cond:
            old = self._state
            self._state = new
            self._cond.notify_all()
            return old

    def _wait_while(self, state: WorkerState) -> None:
        with self._cond:
            self._cond.wait_for(lambda: self._state is not state)

    def _run(self) -> None:
        while self.state is not WorkerState.KILLING:
            self._compare_exchange(WorkerState.STARTING, WorkerState.STARTED)
            try:
                self.work_loop()
            except Exception as exc:
                warn(f"Exception thrown in Worker thread: {exc}")
                if self._exit_on_error:
                    warn("Terminating due to --exit")
                    signal.raise_signal(signal.SIGTERM)
            previous = self._exchange(WorkerState.STOPPED)
            if previous in (WorkerState.KILLING, WorkerState.STARTING):
                self._exchange(previous)
            self._wait_while(WorkerState.STOPPED)

    def start_working(self) -> None:
        """Start the thread, or restart a stopped one, and wait until it runs."""
        with self._work_lock:
            if self._thread is not None:
                self._compare_exchange(WorkerState.STOPPED, WorkerState.STARTING)
            else:
                self._exchange(WorkerState.STARTING)
                self._thread = threading.Thread(target=self._run, name=self._name, daemon=True)
                self._thread.start()
            self._wait_while(WorkerState.STARTING)

    def trigger_stop_working(self) -> None:
        """Ask the work loop to stop without waiting for it."""
        with self._work_lock:
            if self._thread is not None:
                self._compare_exchange(WorkerState.STARTED, WorkerState.STOPPING)

    def stop_working(self) -> None:
        """Ask the work loop to stop and wait until it has."""
        with self._work_lock:
            if self._thread is not None:
                self._compare_exchange(WorkerState.STARTED, WorkerState.STOPPING)
                with self._cond:
                    self._cond.wait_for(lambda: self._state is WorkerState.STOPPED)

    def should_stop(self) -> bool:
        """True whenever the worker is not in the started state."""
        return self.state is not WorkerState.STARTED

    def close(self) -> None:
        """Terminate the thread for good and wait for it to end."""
        with self._work_lock:
            if self._thread is not None:
                self._exchange(WorkerState.KILLING)
                self._thread.join()
                self._thread = None

    @abc.abstractmethod
    def work_loop(self) -> None:
        """The work done on the thread; should return once ``should_stop()`` is true."""

    def __enter__(self) -> Worker:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()