"""Plain-text rendering of console messages."""

from ..interfaces import Message, MessageType

BANNER = "Copybara source mover (Version: {version})"


def startup_banner(version: str) -> str:
    """Banner text shown at startup."""
    return BANNER.format(version=version)


class MessageFormatter:
    """Renders a message as a single "LABEL: text" line."""

    def format(self, message_type: MessageType, text: str) -> str:
        """Render one line. For STARTUP, text is the version."""
        if message_type is MessageType.STARTUP:
            return f"{MessageType.INFO.name}: {startup_banner(text)}"
        return f"{message_type.name}: {text}"

    def render(self, message: Message) -> str:
        return self.format(message.type, message.text)
