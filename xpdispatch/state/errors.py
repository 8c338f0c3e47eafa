"""State-layer exceptions."""


class StateError(Exception):
    """Base exception for state-layer errors."""


class InvariantViolation(StateError):
    """Raised when a transition would publish an inconsistent snapshot.

    Always a programming error: the public mutation operations are total
    and never produce one.
    """

    def __init__(self, store: str, message: str):
        self.store = store
        super().__init__(f"{store}: {message}")
