"""Split YAML frontmatter from a markdown body.

A frontmatter block is a leading ``---`` line, YAML, and a closing ``---``
(or ``...``) line. Parsing is permissive: anything that does not decode to a
mapping leaves the metadata empty and the whole file as body.
"""

import logging

import yaml

logger = logging.getLogger(__name__)

OPEN_DELIMITER = "---"
CLOSE_DELIMITERS = ("---", "...")
BOM = "\ufeff"


def split_frontmatter(text: str) -> tuple[str | None, str]:
    """Split raw text into (frontmatter block, body).

    Returns (None, text) when the text has no complete frontmatter block.
    The body is returned exactly as it follows the closing delimiter line.
    """
    lines = text.splitlines(keepends=True)
    if not lines or lines[0].rstrip() != OPEN_DELIMITER:
        return None, text

    for i in range(1, len(lines)):
        if lines[i].rstrip() in CLOSE_DELIMITERS:
            return "".join(lines[1:i]), "".join(lines[i + 1:])

    return None, text


def parse_frontmatter(text: str, source: str | None = None) -> tuple[dict, str]:
    """Parse raw file text into (metadata, body).

    Args:
        text: Full file contents
        source: Optional file name used in log messages

    Returns:
        Tuple of (metadata mapping, markdown body). Malformed frontmatter
        yields ({}, text) rather than raising.
    """
    if text.startswith(BOM):
        text = text[len(BOM):]

    block, body = split_frontmatter(text)
    if block is None:
        if text.startswith(OPEN_DELIMITER + "\n") or text.startswith(OPEN_DELIMITER + "\r\n"):
            logger.warning("Unterminated frontmatter in %s", source or "<text>")
        return {}, text

    try:
        data = yaml.safe_load(block)
    except yaml.YAMLError as e:
        logger.warning("Malformed frontmatter in %s: %s", source or "<text>", e)
        return {}, text

    if data is None:
        return {}, body
    if not isinstance(data, dict):
        logger.warning(
            "Frontmatter in %s is a %s, not a mapping", source or "<text>", type(data).__name__
        )
        return {}, text

    return data, body
