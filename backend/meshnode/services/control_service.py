"""
Daemon control state.
"""
import threading

ACTION_STATES = {
    "start": "running",
    "pause": "paused",
    "stop": "stopped",
}


class DaemonState:
    """Process-wide run state of the bandwidth-sharing daemon."""
    def __init__(self, status: str = "running"):
        self._status = status
        self._lock = threading.Lock()

    @property
    def status(self) -> str:
        return self._status

    def apply(self, action: str) -> str:
        """Apply a control action and return the new state. Unknown actions raise ValueError."""
        if action not in ACTION_STATES:
            raise ValueError(f"Unknown control action: {action}")
        with self._lock:
            self._status = ACTION_STATES[action]
            return self._status


daemon_state = DaemonState()
