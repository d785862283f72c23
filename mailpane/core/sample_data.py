"""Sample mailbox content for first start."""

import random
from datetime import datetime, timedelta
from typing import List, Optional

from mailpane.core.database.repositories.message import MessageRepository
from mailpane.core.models.message import Folder, Message
from mailpane.utils.errors import ErrorHandler
from mailpane.utils.logging import async_log_call, get_logger

logger = get_logger(__name__)

OWNER = "me@mailpane.local"

CONTACTS = [
    "alice@example.com",
    "bob@example.org",
    "carol@example.net",
    "dave@example.com",
    "erin@example.org",
    "frank@example.net",
    "grace@example.com",
]

SPAMMERS = ["winner@prizes.example", "deals@cheap-pills.example"]

SUBJECTS = [
    "Project update",
    "Lunch tomorrow?",
    "Your receipt",
    "Meeting notes",
    "Quarterly report",
    "Weekend plans",
    "Re: Proposal draft",
    "Travel itinerary",
    "Invoice #{n}",
    "Build failed on main",
]

SPAM_SUBJECTS = ["You have won!", "Limited offer just for you", "Claim your prize"]

BODY_LINES = [
    "Quick update - milestones are on track.",
    "Let me know if that works for you.",
    "I've attached the slides from the last session.",
    "Thanks for sending this over.",
    "Can we move this to Thursday?",
    "Please review before Friday.",
    "Order #{n} has been processed successfully.",
]

# Relative share of generated messages per physical folder
FOLDER_WEIGHTS = {
    Folder.INBOX: 60,
    Folder.SENT: 12,
    Folder.DRAFTS: 6,
    Folder.JUNK: 10,
    Folder.TRASH: 12,
}


def generate_messages(
    count: int, seed: int = 2016, now: Optional[datetime] = None
) -> List[Message]:
    """Build ``count`` plausible messages. Same seed, same mailbox."""
    rng = random.Random(seed)
    now = now or datetime.now().replace(microsecond=0)
    folders = list(FOLDER_WEIGHTS)
    weights = list(FOLDER_WEIGHTS.values())

    generated = []
    for _ in range(count):
        folder = rng.choices(folders, weights=weights)[0]
        contact = rng.choice(CONTACTS)
        n = rng.randint(1000, 99999)

        if folder is Folder.JUNK:
            sender, subject = rng.choice(SPAMMERS), rng.choice(SPAM_SUBJECTS)
        else:
            sender, subject = contact, rng.choice(SUBJECTS).format(n=n)

        if folder in (Folder.SENT, Folder.DRAFTS):
            sender, recipient = OWNER, contact
        else:
            recipient = OWNER

        body = "\n\n".join(
            line.format(n=n) for line in rng.sample(BODY_LINES, k=rng.randint(1, 3))
        )
        outgoing = folder in (Folder.SENT, Folder.DRAFTS)

        generated.append(
            Message(
                folder=folder,
                sender=sender,
                recipient=recipient,
                subject=subject,
                body=body,
                received_at=now - timedelta(minutes=rng.randint(1, 60 * 24 * 60)),
                is_read=outgoing or rng.random() < 0.55,
                is_flagged=folder is Folder.INBOX and rng.random() < 0.15,
            )
        )

    return generated


class DatabaseInitialization:
    """Seeds an empty store with generated sample messages."""

    def __init__(self, repository: MessageRepository, size: int = 140, seed: int = 2016):
        self.repository = repository
        self.size = size
        self.seed = seed

    @ErrorHandler.wrap
    @async_log_call
    async def init_database_if_empty(self) -> int:
        """Create the schema and seed it when no message exists.

        Returns:
            Number of inserted messages, 0 if the store was already populated
        """
        await self.repository.create_schema()

        existing = await self.repository.count()
        if existing:
            logger.info(f"Store already holds {existing} messages, skipping sample data")
            return 0
        if not self.size:
            return 0

        result = await self.repository.save_batch(
            generate_messages(self.size, seed=self.seed)
        )
        logger.info(f"Inserted {result.succeeded} sample messages")
        return result.succeeded
