"""Route state for the console front end."""

import logging

logger = logging.getLogger(__name__)


class Navigator:
    """
    Tracks the route the front end should be showing.

    The HTTP client uses it to force the login view when a session is
    rejected; front ends read ``current_route`` after each operation.
    """

    def __init__(self, login_route: str = "/login", initial_route: str = "/"):
        self.login_route = login_route
        self.current_route = initial_route
        self.history: list[str] = [initial_route]

    def navigate(self, route: str) -> None:
        self.current_route = route
        self.history.append(route)

    def redirect_to_login(self) -> None:
        logger.debug(f"Redirecting to {self.login_route}")
        self.navigate(self.login_route)

    @property
    def at_login(self) -> bool:
        return self.current_route == self.login_route
