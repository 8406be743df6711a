# Turn env file text into ordered key/value entries.
import logging
from typing import List, Optional, Tuple

from env_plus.errors import MalformedLineError
from env_plus.schemas import Entry, LoaderConfig

logger = logging.getLogger("env_plus")


# Split file content into lines, tolerating both \n and \r\n endings.
def split_lines(content: str) -> List[str]:
    return [line.rstrip("\r") for line in content.split("\n")]


# Parse one raw line. Comments and blank lines give None; anything else that
# is not a `key<delimiter>value` assignment the OS would accept raises
# MalformedLineError.
def parse_line(raw: str, config: LoaderConfig, line: int = 1) -> Optional[Entry]:
    if not raw.strip() or raw.lstrip().startswith(config.comment):
        return None

    text = raw
    if config.inline_comments:
        text = text.split(config.comment, 1)[0]

    key, found, value = text.partition(config.delimiter)
    key = key.strip()
    value = value.strip()
    if not found or not key:
        raise MalformedLineError(line, raw)
    # os.environ rejects these names and values.
    if "=" in key or "\x00" in key or "\x00" in value:
        raise MalformedLineError(line, raw)
    return Entry(key=key, value=value, line=line)


# Parse whole file content. Returns the entries in file order and the line
# numbers of malformed lines that were skipped (always empty in strict mode).
def parse_content(content: str, config: LoaderConfig) -> Tuple[List[Entry], List[int]]:
    entries: List[Entry] = []
    skipped: List[int] = []
    for number, raw in enumerate(split_lines(content), start=1):
        try:
            entry = parse_line(raw, config, number)
        except MalformedLineError:
            if config.strict:
                raise
            logger.debug("Skipping malformed line %d: %r", number, raw)
            skipped.append(number)
            continue
        if entry is not None:
            entries.append(entry)
    return entries, skipped
