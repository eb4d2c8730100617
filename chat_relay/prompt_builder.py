from typing import Any, Iterable, List, Mapping, Tuple


class PromptBuilder:
    """Flattens a conversation into a single newline-delimited prompt string.

    Usage:
      pb = PromptBuilder()
      pb.add_part("user", "hi")
      pb.add_part("assistant", "yo")
      prompt = pb.build()   # "user: hi\nassistant: yo"

    Parts are rendered as ``<role>: <content>`` in insertion order. Roles are
    not validated and content is passed through untouched (no truncation,
    no escaping).
    """

    def __init__(self, messages: Iterable[Any] = ()):
        self.parts: List[Tuple[str, str]] = []
        self.extend_parts(messages)

    def add_part(self, role: str, content: str) -> None:
        self.parts.append((role, content))

    def extend_parts(self, messages: Iterable[Any]) -> None:
        """Add messages preserving order.

        Each item may be a ``Message`` model (or anything with ``role`` and
        ``content`` attributes), a mapping with those keys, or a
        ``(role, content)`` pair.
        """
        for message in messages:
            if isinstance(message, Mapping):
                self.add_part(message["role"], message["content"])
            elif isinstance(message, tuple):
                role, content = message
                self.add_part(role, content)
            else:
                self.add_part(message.role, message.content)

    def build(self) -> str:
        return "\n".join(f"{role}: {content}" for role, content in self.parts)


def build_prompt(messages: Iterable[Any]) -> str:
    return PromptBuilder(messages).build()
