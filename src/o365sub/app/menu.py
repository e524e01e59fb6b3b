# src/o365sub/app/menu.py
from __future__ import annotations
import enum
import logging
from typing import Callable

from o365sub.core.activity_client import ActivityClient
from o365sub.ui.presenters.render import (
    CONTENT_LIST, RESTART_RESULT, STATUS_LIST, print_view
)

log = logging.getLogger("o365sub")

BANNER = (
    "\ncheck_siem_o365_subscription\n\n"
    "Choose an action:\n"
    "1. Check Subscription Status\n"
    "2. Stop Subscription\n"
    "3. Restart Subscription\n"
    "4. Retrieve Event Logs\n"
    "5. Exit"
)
PROMPT = "Enter your choice [1-5]: "
INVALID = "❌ Invalid choice. Please enter a number between 1 and 5."


class MenuState(enum.Enum):
    AWAITING_CHOICE = "awaiting_choice"
    EXITED = "exited"


class MenuController:
    """
    AWAITING_CHOICE -> (action) -> AWAITING_CHOICE, or -> EXITED on '5'/EOF.
    ApiError from an action is not caught here; it ends the run.
    """
    def __init__(
        self,
        client: ActivityClient,
        read: Callable[[str], str] = input,
        out: Callable[..., None] = print,
    ):
        self.client = client
        self.state = MenuState.AWAITING_CHOICE
        self._read = read
        self._out = out

    def _status(self) -> None:
        log.info("Checking subscription status")
        print_view(self.client.list_subscriptions(), STATUS_LIST, out=self._out)

    def _stop(self) -> None:
        log.info("Stopping subscription")
        self.client.stop_subscription()
        self._out(f"\n⏹ Stop requested for {self.client.content_type}")

    def _restart(self) -> None:
        log.info("Restarting subscription")
        print_view(self.client.start_subscription(), RESTART_RESULT, out=self._out)

    def _content(self) -> None:
        log.info("Retrieving event logs")
        print_view(self.client.list_content(), CONTENT_LIST, out=self._out)

    def _exit(self) -> None:
        log.info("Exiting script")
        self._out("Exiting...")
        self.state = MenuState.EXITED

    def handle(self, choice: str) -> MenuState:
        actions = {
            "1": self._status,
            "2": self._stop,
            "3": self._restart,
            "4": self._content,
            "5": self._exit,
        }
        action = actions.get(choice.strip())
        if action is None:
            log.info("Invalid choice selected")
            self._out(INVALID)
        else:
            action()
        return self.state

    def run(self) -> int:
        while self.state is MenuState.AWAITING_CHOICE:
            self._out(BANNER)
            try:
                choice = self._read(PROMPT)
            except EOFError:
                choice = "5"
            self.handle(choice)
        return 0
