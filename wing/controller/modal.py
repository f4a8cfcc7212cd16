"""Commit / push / help overlay workflow.

Commit: edit a message, confirm to commit. A successful commit moves on to the
push confirmation; a failing one keeps the commit modal open with the error.
Push: confirm to push; success closes the modal and refreshes, failure stays
open for retry. Help: confirm or cancel closes it.

Every commit/push command carries the modal session it was issued in. Results
from an earlier session (the user cancelled or reopened) never change the
overlay; failures are still recorded as ``last_error``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from .commands import Command, Commit, Push, Refresh
from .messages import CommitResult, PushResult
from .state import ExplorerState, Modal

logger = logging.getLogger(__name__)

CONFIRM_KEY = "ENTER"
CANCEL_KEY = "ESC"
EMPTY_MESSAGE_ERROR = "Commit message is required."


class ModalController:
    def __init__(self, state: ExplorerState, request_refresh: Callable[[], Refresh]) -> None:
        self.state = state
        self._request_refresh = request_refresh

    @property
    def active(self) -> bool:
        return self.state.modal is not Modal.NONE

    def _open(self, modal: Modal) -> None:
        state = self.state
        state.modal = modal
        state.modal_error = ""
        state.modal_pending = False
        state.modal_session += 1
        state.dirty = True

    def open_commit(self) -> None:
        self.state.commit_input = self.state.commit_input.cleared()
        self._open(Modal.COMMIT)

    def open_help(self) -> None:
        self._open(Modal.HELP)

    def close(self) -> None:
        state = self.state
        state.modal = Modal.NONE
        state.modal_error = ""
        state.modal_pending = False
        state.modal_session += 1
        state.dirty = True

    def handle_key(self, key: str) -> list[Command]:
        modal = self.state.modal
        if modal is Modal.COMMIT:
            return self._handle_commit_key(key)
        if modal is Modal.PUSH:
            return self._handle_push_key(key)
        if modal is Modal.HELP and key in {CONFIRM_KEY, CANCEL_KEY}:
            self.close()
        return []

    def _handle_commit_key(self, key: str) -> list[Command]:
        state = self.state
        if key == CANCEL_KEY:
            self.close()
            return []
        if key == CONFIRM_KEY:
            if state.modal_pending:
                return []
            message = state.commit_input.value().strip()
            state.dirty = True
            if not message:
                state.modal_error = EMPTY_MESSAGE_ERROR
                return []
            state.modal_error = ""
            state.modal_pending = True
            return [Commit(session=state.modal_session, message=message)]

        updated = state.commit_input.handle_key(key)
        if updated != state.commit_input:
            state.commit_input = updated
            state.dirty = True
        return []

    def _handle_push_key(self, key: str) -> list[Command]:
        state = self.state
        if key == CANCEL_KEY:
            self.close()
            return []
        if key == CONFIRM_KEY and not state.modal_pending:
            state.modal_error = ""
            state.modal_pending = True
            state.dirty = True
            return [Push(session=state.modal_session)]
        return []

    def _is_current(self, session: int, modal: Modal) -> bool:
        return session == self.state.modal_session and self.state.modal is modal

    def on_commit_result(self, result: CommitResult) -> list[Command]:
        state = self.state
        state.dirty = True
        if not self._is_current(result.session, Modal.COMMIT):
            logger.debug("commit result for closed modal session %d", result.session)
            if result.error is not None:
                state.last_error = result.error
                return []
            return [self._request_refresh()]

        state.modal_pending = False
        if result.error is not None:
            state.modal_error = result.error.message
            return []
        state.modal = Modal.PUSH
        state.modal_error = ""
        return []

    def on_push_result(self, result: PushResult) -> list[Command]:
        state = self.state
        state.dirty = True
        if not self._is_current(result.session, Modal.PUSH):
            logger.debug("push result for closed modal session %d", result.session)
            if result.error is not None:
                state.last_error = result.error
                return []
            return [self._request_refresh()]

        state.modal_pending = False
        if result.error is not None:
            state.modal_error = result.error.message
            return []
        self.close()
        return [self._request_refresh()]


__all__ = ["CANCEL_KEY", "CONFIRM_KEY", "EMPTY_MESSAGE_ERROR", "ModalController"]
