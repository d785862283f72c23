"""
Tests for the message domain model
"""
import pytest

from mailpane.core.models.message import Folder

from .test_helpers import MessageTestHelper


class TestFolder:
    """Tests for Folder"""

    @pytest.mark.parametrize("value", ["inbox", "INBOX", " Inbox "])
    def test_from_string(self, value):
        assert Folder.from_string(value) is Folder.INBOX

    def test_from_string_unknown(self):
        with pytest.raises(ValueError):
            Folder.from_string("archive")

    def test_display_name(self):
        assert Folder.JUNK.display_name == "Junk"

    def test_physical_folders_exclude_flagged(self):
        assert Folder.FLAGGED not in Folder.physical()
        assert len(Folder.physical()) == 5


class TestMessage:
    """Tests for Message"""

    def test_cannot_live_in_flagged(self):
        with pytest.raises(ValueError):
            MessageTestHelper.create_message(folder=Folder.FLAGGED)

    def test_read_state(self):
        message = MessageTestHelper.create_message()
        message.mark_as_read()
        assert message.is_read
        message.mark_as_unread()
        assert not message.is_read

    def test_toggle_flag(self):
        message = MessageTestHelper.create_message()
        message.toggle_flag()
        assert message.is_flagged
        message.toggle_flag()
        assert not message.is_flagged

    def test_preview_strips_html_and_truncates(self):
        message = MessageTestHelper.create_message(body="<p>" + "word " * 50 + "</p>")
        preview = message.get_preview(20)

        assert len(preview) == 20
        assert preview.endswith("...")
        assert "<p>" not in preview

    def test_row_round_trip(self):
        message = MessageTestHelper.create_message(is_flagged=True)
        row = message.to_row()

        assert "id" not in row
        row["id"] = 5
        restored = type(message).from_row(row)
        assert restored.id == 5
        assert restored.is_flagged
        assert restored.folder is Folder.INBOX
