"""Split raw content bytes into text lines."""

BOM = "\ufeff"


def get_lines(data: bytes) -> list[str]:
    """Decode content and split it into lines without terminators.

    ``\\r\\n`` and lone ``\\r`` terminators are treated as ``\\n``. A final
    terminator does not produce an extra empty line.

    Args:
        data: Raw content bytes (UTF-8, undecodable bytes are replaced)

    Returns:
        The lines of the content, empty for empty input
    """
    if not data:
        return []

    text = data.decode("utf-8", errors="replace")
    if text.startswith(BOM):
        text = text[len(BOM):]

    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if not text:
        return []

    lines = text.split("\n")
    if text.endswith("\n"):
        lines.pop()
    return lines
