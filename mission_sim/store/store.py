"""Mission store: holds the current state and applies actions to it.

The store is an explicit object passed to whoever needs it; there is no
process-wide instance.
"""

from __future__ import annotations

from collections.abc import Callable

from mission_sim.store.actions import Action, ActionType
from mission_sim.store.reducer import reduce
from mission_sim.store.state import MissionState, create_initial_state

Listener = Callable[[MissionState], None]


class MissionStore:
    """Synchronous state container around the mission reducer.

    Actions are applied in call order. Subscribers are called with the new
    state after every dispatch that produced a different state object; a
    no-op dispatch notifies nobody.
    """

    def __init__(self, initial_state: MissionState | None = None) -> None:
        """Initialize the store.

        Args:
            initial_state: Starting state. Defaults to the development mission.
        """
        self._state = initial_state if initial_state is not None else create_initial_state()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> MissionState:
        """Return the current state."""
        return self._state

    def dispatch(self, action: Action | ActionType, payload: object = None) -> MissionState:
        """Apply an action and notify subscribers if the state changed.

        Args:
            action: Action to apply, or an action type combined with ``payload``.
            payload: Payload used when ``action`` is a bare action type.

        Returns:
            The state after the action.
        """
        if isinstance(action, ActionType):
            action = Action(type=action, payload=payload)

        previous = self._state
        self._state = reduce(previous, action)
        if self._state is not previous:
            for listener in list(self._listeners):
                listener(self._state)
        return self._state

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener`` for state changes.

        Returns:
            A callable that removes the listener; calling it twice is harmless.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
