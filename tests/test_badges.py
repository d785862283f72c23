"""
Tests for badge formatting and badge supplier registration

Tests cover:
- Count to badge text formatting
- Menu caption markup
- One supplier per folder, registration closed after startup
- Supplier invocation per refresh
"""
import pytest

from mailpane.core.models.message import Folder
from mailpane.tui.badges import BadgeRegistry, format_badge, format_caption
from mailpane.utils.errors import BadgeRegistryFrozenError, DuplicateBadgeSupplierError


class CountingSupplier:
    """Async supplier that records how often it was queried"""

    def __init__(self, value):
        self.value = value
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        return self.value


class TestFormatBadge:
    """Tests for format_badge"""

    @pytest.mark.parametrize("count", [None, 0, -1, -250])
    def test_non_positive_counts_are_empty(self, count):
        assert format_badge(count) == ""

    @pytest.mark.parametrize("count", [1, 7, 42, 99])
    def test_small_counts_are_shown(self, count):
        assert format_badge(count) == str(count)

    @pytest.mark.parametrize("count", [100, 101, 5000])
    def test_large_counts_are_capped(self, count):
        assert format_badge(count) == "99+"


class TestFormatCaption:
    """Tests for menu caption markup"""

    def test_empty_badge_shows_bare_name(self):
        assert format_caption(Folder.INBOX, "") == "Inbox"

    def test_badge_follows_folder_name(self):
        caption = format_caption(Folder.FLAGGED, "12")
        assert caption.startswith("Flagged ")
        assert " 12 " in caption


class TestBadgeRegistry:
    """Tests for BadgeRegistry"""

    async def test_registered_supplier_is_formatted(self):
        registry = BadgeRegistry()
        registry.register(Folder.INBOX, CountingSupplier(150))

        assert await registry.badge_text(Folder.INBOX) == "99+"

    async def test_supplier_called_once_per_refresh(self):
        registry = BadgeRegistry()
        supplier = CountingSupplier(3)
        registry.register(Folder.INBOX, supplier)

        assert await registry.badge_text(Folder.INBOX) == "3"
        assert supplier.calls == 1

        supplier.value = 2
        assert await registry.badge_text(Folder.INBOX) == "2"
        assert supplier.calls == 2

    async def test_folder_without_supplier_is_empty(self):
        registry = BadgeRegistry()
        supplier = CountingSupplier(10)
        registry.register(Folder.INBOX, supplier)

        for folder in (Folder.DRAFTS, Folder.SENT, Folder.JUNK, Folder.TRASH):
            assert await registry.badge_text(folder) == ""
        assert supplier.calls == 0

    async def test_none_count_is_empty(self):
        registry = BadgeRegistry()
        registry.register(Folder.FLAGGED, CountingSupplier(None))

        assert await registry.badge_text(Folder.FLAGGED) == ""

    def test_second_supplier_for_folder_rejected(self):
        registry = BadgeRegistry()
        registry.register(Folder.INBOX, CountingSupplier(1))

        with pytest.raises(DuplicateBadgeSupplierError):
            registry.register(Folder.INBOX, CountingSupplier(2))

    def test_frozen_registry_rejects_registration(self):
        registry = BadgeRegistry()
        registry.freeze()

        assert registry.frozen
        with pytest.raises(BadgeRegistryFrozenError):
            registry.register(Folder.SENT, CountingSupplier(1))
        assert not registry.has_supplier(Folder.SENT)
