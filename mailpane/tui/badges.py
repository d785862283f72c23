"""Unread badges shown next to sidebar folders."""

from typing import Awaitable, Callable, Dict, Optional

from mailpane.core.models.message import Folder
from mailpane.utils.errors import BadgeRegistryFrozenError, DuplicateBadgeSupplierError
from mailpane.utils.logging import get_logger

logger = get_logger(__name__)

BADGE_LIMIT = 99

BadgeSupplier = Callable[[], Awaitable[Optional[int]]]


def format_badge(count: Optional[int]) -> str:
    """Badge text for a count: empty, the number, or ``99+``."""
    if count is None or count <= 0:
        return ""
    if count > BADGE_LIMIT:
        return f"{BADGE_LIMIT}+"
    return str(count)


def format_caption(folder: Folder, badge_text: str) -> str:
    """Menu caption as Textual markup: folder name plus an optional badge."""
    if not badge_text:
        return folder.display_name
    return f"{folder.display_name} [reverse] {badge_text} [/]"


class BadgeRegistry:
    """Maps folders to the query that counts their badge.

    Suppliers are registered during startup; ``freeze`` ends registration.
    """

    def __init__(self) -> None:
        self._suppliers: Dict[Folder, BadgeSupplier] = {}
        self._frozen = False

    def register(self, folder: Folder, supplier: BadgeSupplier) -> None:
        if self._frozen:
            raise BadgeRegistryFrozenError(
                f"Cannot register a badge for {folder.value} after startup"
            )
        if folder in self._suppliers:
            raise DuplicateBadgeSupplierError(
                f"{folder.value} already has a badge supplier"
            )
        self._suppliers[folder] = supplier
        logger.debug(f"Badge supplier registered for {folder.value}")

    def freeze(self) -> None:
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    def has_supplier(self, folder: Folder) -> bool:
        return folder in self._suppliers

    async def badge_text(self, folder: Folder) -> str:
        """Query the folder's supplier once and format the result."""
        supplier = self._suppliers.get(folder)
        if supplier is None:
            return ""
        return format_badge(await supplier())
