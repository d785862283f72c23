"""Route based navigation between views.

Routes look like ``<viewName>/<parameters>``, for example
``folderView/inbox``. The navigator asks its view provider for the view
named by the route and hands it the parameters.
"""

from typing import Callable, Optional, Protocol

from mailpane.core.models.message import Folder
from mailpane.utils.errors import NavigationError
from mailpane.utils.logging import get_logger

logger = get_logger(__name__)

FOLDER_VIEW_NAME = "folderView"


class View(Protocol):
    async def enter(self, parameters: str) -> None: ...


ViewProvider = Callable[[str], Optional[View]]


def folder_route(folder: Folder | str) -> str:
    name = folder.value if isinstance(folder, Folder) else folder
    return f"{FOLDER_VIEW_NAME}/{name}"


def split_route(route: str) -> tuple[str, str]:
    view_name, _, parameters = route.strip().strip("/").partition("/")
    return view_name, parameters


class Navigator:
    """Keeps the current route and dispatches to views."""

    def __init__(self, provider: ViewProvider):
        self.provider = provider
        self.state = ""

    async def navigate_to(self, route: str) -> None:
        """Enter the view for ``route`` and make it the current state.

        Raises:
            NavigationError: If no view matches or the view rejects the parameters
        """
        view_name, parameters = split_route(route)
        view = self.provider(view_name)
        if view is None:
            raise NavigationError(
                f"No view named '{view_name}'", details={"route": route}
            )

        await view.enter(parameters)
        self.state = f"{view_name}/{parameters}" if parameters else view_name
        logger.debug(f"Navigated to {self.state}")
