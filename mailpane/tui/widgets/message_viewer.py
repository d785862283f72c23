from typing import Optional

from rich.markup import escape
from textual.containers import VerticalScroll
from textual.widgets import Static

from mailpane.core.models.message import Message


class MessageViewer(VerticalScroll):
    """Displays full content of the selected message."""

    def __init__(self):
        super().__init__(id="message-viewer")
        self.body = Static("No message selected.", classes="empty-view")

    def compose(self):
        yield self.body

    def show_message(self, message: Optional[Message]) -> None:
        """Render the selected message, or the empty placeholder."""
        if message is None:
            self.body.set_classes("empty-view")
            self.body.update("No message selected.")
            return

        header = (
            f"[b]From:[/b] {escape(message.sender)}\n"
            f"[b]To:[/b] {escape(message.recipient)}\n"
            f"[b]Subject:[/b] {escape(message.subject)}\n"
            f"[b]Date:[/b] {message.received_at:%Y-%m-%d %H:%M}\n\n"
        )
        self.body.set_classes("message-body")
        self.body.update(header + escape(message.body or "(No content)"))
        self.scroll_home(animate=False)
