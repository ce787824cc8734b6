"""Language server session lifecycle and the errors it reports."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Callable


class SessionState(IntEnum):
    """State of a session with respect to the LSP lifecycle."""

    EMPTY = -1
    PREPARED = 0
    INITIALIZED_UNCONFIRMED = 1
    INITIALIZED_CONFIRMED = 2
    DOWN = 3

    def __str__(self) -> str:
        return _STATE_NAMES[self]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)


_STATE_NAMES = {
    SessionState.EMPTY: "<empty>",
    SessionState.PREPARED: "prepared",
    SessionState.INITIALIZED_UNCONFIRMED: "initialized (unconfirmed)",
    SessionState.INITIALIZED_CONFIRMED: "initialized (confirmed)",
    SessionState.DOWN: "down",
}


class ErrorCode(IntEnum):
    """JSON-RPC error codes used by the session."""

    SESSION_NOT_INITIALIZED = -32002
    INVALID_REQUEST = -32600
    SYSTEM_ERROR = -32400

    @property
    def description(self) -> str:
        return _CODE_DESCRIPTIONS.get(self, f"error code {int(self)}")


_CODE_DESCRIPTIONS = {
    ErrorCode.INVALID_REQUEST: "invalid request",
    ErrorCode.SYSTEM_ERROR: "system error",
}


class SessionError(Exception):
    """An error in the session lifecycle, optionally carrying a JSON-RPC code."""

    def __init__(self, message: str, code: ErrorCode | None = None) -> None:
        if code is not None:
            message = f"{code.description}: {message}"
        super().__init__(message)
        self.code = code


class UnexpectedSessionState(SessionError):
    """The session was found in a state other than the one expected."""

    def __init__(
        self,
        expected: SessionState,
        current: SessionState,
        code: ErrorCode | None = None,
    ) -> None:
        super().__init__(f"session is not {expected}, current state: {current}", code)
        self.expected = expected
        self.current = current


def session_not_initialized_error(state: SessionState) -> UnexpectedSessionState:
    """The error for a request that needs a confirmed initialization."""
    expected = SessionState.INITIALIZED_CONFIRMED
    if state < expected:
        return UnexpectedSessionState(expected, state, ErrorCode.SESSION_NOT_INITIALIZED)
    if state == SessionState.DOWN:
        return UnexpectedSessionState(expected, state, ErrorCode.INVALID_REQUEST)
    return UnexpectedSessionState(expected, state)


def session_already_initialized_error(request_id: str) -> SessionError:
    return SessionError(
        f"session was already initialized via request ID {request_id}",
        ErrorCode.SYSTEM_ERROR,
    )


def session_already_down_error(request_id: str) -> SessionError:
    return SessionError(
        f"session was already shut down via request {request_id}",
        ErrorCode.INVALID_REQUEST,
    )


class Session:
    """Tracks the lifecycle of one client session."""

    def __init__(self, exit_func: Callable[[], None]) -> None:
        self._exit_func = exit_func
        self._state = SessionState.EMPTY
        self.initialize_request: str | None = None
        self.initialize_time: datetime | None = None
        self.initialized_request: str | None = None
        self.initialized_time: datetime | None = None
        self.down_request: str | None = None
        self.down_time: datetime | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    def prepare(self) -> None:
        if self._state != SessionState.EMPTY:
            raise UnexpectedSessionState(SessionState.INITIALIZED_CONFIRMED, self._state)
        self._state = SessionState.PREPARED

    def is_initialized_unconfirmed(self) -> bool:
        return self._state == SessionState.INITIALIZED_UNCONFIRMED

    def initialize(self, request_id: str) -> None:
        if self._state != SessionState.PREPARED:
            if self.is_initialized_unconfirmed():
                raise session_already_initialized_error(self.initialize_request or "")
            raise SessionError(
                f"session is not ready to be initalized. State: {self._state}"
            )
        self.initialize_request = request_id
        self.initialize_time = datetime.now()
        self._state = SessionState.INITIALIZED_UNCONFIRMED

    def check_initialization_is_confirmed(self) -> None:
        if self._state != SessionState.INITIALIZED_CONFIRMED:
            raise session_not_initialized_error(self._state)

    def confirm_initialization(self, request_id: str) -> None:
        if self._state != SessionState.INITIALIZED_UNCONFIRMED:
            if self._state == SessionState.INITIALIZED_CONFIRMED:
                raise SessionError(
                    f"session was already confirmed as initalized at "
                    f"{self.initialized_time} via request {self.initialized_request}"
                )
            raise SessionError(
                f"session is not ready to be confirmed as initialized ({self._state})"
            )
        self.initialized_request = request_id
        self.initialized_time = datetime.now()
        self._state = SessionState.INITIALIZED_CONFIRMED

    def shutdown(self, request_id: str) -> None:
        if self._state == SessionState.DOWN:
            raise session_already_down_error(self.down_request or "")
        self.down_request = request_id
        self.down_time = datetime.now()
        self._state = SessionState.DOWN

    def exit(self) -> None:
        if self._state not in (SessionState.DOWN, SessionState.PREPARED):
            raise SessionError(f"Cannot exit as session is {self._state}")
        self._exit_func()