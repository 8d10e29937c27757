import re
from typing import Dict

from claim_engine.application.ports.message_formatter import IMessageFormatter

# Markup tags and the chat colour codes they stand for.
MARKUP_COLOURS: Dict[str, str] = {
    "empty": "",
    "black": "§0",
    "navy": "§1",
    "green": "§2",
    "teal": "§3",
    "red": "§4",
    "purple": "§5",
    "gold": "§6",
    "silver": "§7",
    "gray": "§8",
    "blue": "§9",
    "lime": "§a",
    "aqua": "§b",
    "rose": "§c",
    "pink": "§d",
    "yellow": "§e",
    "white": "§f",
    # Semantic tags
    "l": "§2",  # logo
    "a": "§6",  # art
    "n": "§7",  # notice
    "i": "§e",  # info
    "g": "§a",  # good
    "b": "§c",  # bad
    "h": "§d",  # highlight
    "c": "§b",  # command
    "p": "§3",  # parameter
}

_TAG_PATTERN = re.compile(r"<(\w+)>")


class MarkupMessageFormatter(IMessageFormatter):
    """
    Replaces the markup tags of a template with colour codes, then interpolates %s placeholders.
    Arguments are inserted as they are, so markup inside them is never parsed.
    With strip=True the tags are removed instead, for plain consoles and logs.
    Unknown tags are left as they are.
    """

    def __init__(self, strip: bool = False):
        self._strip = strip

    def format(self, template: str, *args: object) -> str:
        text = _TAG_PATTERN.sub(self._replace_tag, template)
        return text % args if args else text

    def _replace_tag(self, match: re.Match) -> str:
        tag = match.group(1)
        if tag not in MARKUP_COLOURS:
            return match.group(0)
        return "" if self._strip else MARKUP_COLOURS[tag]
