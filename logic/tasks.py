import queue
import threading
from dataclasses import dataclass
from typing import Any, Callable, Optional

from logic.logger import get_logger

log = get_logger(__name__)

# widget.after(ms, callback) or anything with the same shape
Scheduler = Callable[[int, Callable[[], None]], Any]


@dataclass
class TaskResult:
    value: Any = None
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class BackgroundTask:
    """
    Run blocking calls off the Tk thread and hand results back on it.

    The worker only touches a queue; the Tk side polls that queue with
    `after()`. If the owning view is gone by the time a result arrives
    (`is_alive()` is False) the result is dropped instead of delivered.
    """

    def __init__(self, schedule: Scheduler, is_alive: Callable[[], bool], poll_ms: int = 50):
        self._schedule = schedule
        self._is_alive = is_alive
        self.poll_ms = poll_ms

    def submit(self, fn: Callable[[], Any], on_done: Callable[[TaskResult], None], name: str = "task") -> threading.Thread:
        results: "queue.Queue[TaskResult]" = queue.Queue(maxsize=1)

        def work():
            try:
                results.put(TaskResult(value=fn()))
            except Exception as e:
                results.put(TaskResult(error=e))

        worker = threading.Thread(target=work, name=f"casedb-{name}", daemon=True)
        worker.start()
        self._schedule(self.poll_ms, lambda: self._poll(results, on_done, name))
        return worker

    def _poll(self, results: "queue.Queue[TaskResult]", on_done, name: str) -> None:
        if not self._is_alive():
            log.debug("Dropping %s result: view was torn down", name)
            return
        try:
            result = results.get_nowait()
        except queue.Empty:
            self._schedule(self.poll_ms, lambda: self._poll(results, on_done, name))
            return
        on_done(result)
