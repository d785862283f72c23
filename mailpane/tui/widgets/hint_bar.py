from textual.widgets import Static


class HintBar(Static):
    """Displays keyboard shortcuts."""

    def __init__(self):
        super().__init__(
            "[b]1-6[/b] Folders · [b]Enter[/b] Open · [b]R[/b] Read/Unread · "
            "[b]F[/b] Flag · [b]Q[/b] Quit",
            id="hint-bar",
        )
