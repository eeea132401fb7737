"""Navigation between the news screen and the greeting screen."""

from dataclasses import dataclass
from typing import Any, Dict, List, Tuple


NEWS_ROUTE = "news"
GREETING_ROUTE = "greeting"
ROUTES = (NEWS_ROUTE, GREETING_ROUTE)


@dataclass(frozen=True)
class GreetingScreen:
    name: str
    button_label: str = "Go to first Screen"

    @property
    def lines(self) -> Tuple[str, str]:
        return ("this is the Second Screen", f"Welcome {self.name}")


class Navigator:
    """Back stack of routes, starting on the news screen."""

    def __init__(self):
        self._stack: List[Tuple[str, Dict[str, Any]]] = [(NEWS_ROUTE, {})]

    @property
    def current_route(self) -> str:
        return self._stack[-1][0]

    @property
    def current_args(self) -> Dict[str, Any]:
        return dict(self._stack[-1][1])

    def navigate(self, route: str, **args: Any) -> None:
        if route not in ROUTES:
            raise ValueError(f"Unknown route: {route}")
        self._stack.append((route, args))

    def show_greeting(self, name: str) -> GreetingScreen:
        self.navigate(GREETING_ROUTE, name=name)
        return GreetingScreen(name=name)

    @property
    def depth(self) -> int:
        return len(self._stack)

    def back_to_news(self, name: str) -> None:
        """The greeting screen's button: return to the news screen with the name.

        Everything above the news entry is popped, so repeated round trips
        never grow the stack.
        """
        while self._stack[-1][0] != NEWS_ROUTE:
            self._stack.pop()
        self._stack[-1] = (NEWS_ROUTE, {"name": name})
