"""Session-scoped owner of the contact form state."""

import logging
import threading
from typing import Callable, List, Optional

from contact_form.graph import SubmitGraphFactory
from contact_form.state import FormState

logger = logging.getLogger(__name__)

Observer = Callable[[FormState], None]


class FormController:
    """Single writer of :class:`FormState`.

    Every operation builds a new immutable state and swaps it in under the
    lock; observers are called afterwards, outside the lock, with the state
    that was published. Equal consecutive states are not re-published.
    """

    def __init__(self, factory: Optional[SubmitGraphFactory] = None) -> None:
        self._lock = threading.RLock()
        self._state = FormState()
        self._observers: List[Observer] = []
        self._submit_graph = (factory or SubmitGraphFactory()).compile()

    @property
    def state(self) -> FormState:
        return self._state

    def subscribe(self, observer: Observer) -> Callable[[], None]:
        """Register ``observer`` and call it once with the current state.

        Returns a callable that removes the observer again.
        """
        with self._lock:
            self._observers.append(observer)
            current = self._state
        self._notify_one(observer, current)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def set_first_name(self, value: str) -> FormState:
        return self._replace(first_name=value)

    def set_last_name(self, value: str) -> FormState:
        return self._replace(last_name=value)

    def set_phone(self, value: str) -> FormState:
        return self._replace(phone=value)

    def set_email(self, value: str) -> FormState:
        return self._replace(email=value)

    def submit(self) -> FormState:
        with self._lock:
            new_state = SubmitGraphFactory.run(self._submit_graph, self._state)
            changed = self._swap(new_state)
        logger.debug(
            "submit: name=%s phone=%s email=%s",
            new_state.is_valid_name,
            new_state.is_valid_phone,
            new_state.is_valid_email,
        )
        if changed:
            self._publish(new_state)
        return new_state

    def close(self) -> None:
        with self._lock:
            self._observers.clear()
            self._state = FormState()
        logger.debug("form session closed")

    def __enter__(self) -> "FormController":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _replace(self, **fields: str) -> FormState:
        with self._lock:
            new_state = self._state.model_copy(update=fields)
            changed = self._swap(new_state)
        logger.debug("updated %s", ", ".join(fields))
        if changed:
            self._publish(new_state)
        return new_state

    def _swap(self, new_state: FormState) -> bool:
        if new_state == self._state:
            return False
        self._state = new_state
        return True

    def _publish(self, state: FormState) -> None:
        with self._lock:
            observers = list(self._observers)
        for observer in observers:
            # An observer may have published a newer state already; that
            # publish reached everyone, so stale deliveries are dropped.
            with self._lock:
                if state is not self._state:
                    return
            self._notify_one(observer, state)

    @staticmethod
    def _notify_one(observer: Observer, state: FormState) -> None:
        try:
            observer(state)
        except Exception:
            logger.exception("form observer %r failed", observer)
