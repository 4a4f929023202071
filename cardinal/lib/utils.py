import gzip
import sys
from typing import Iterator, List


def read_values(filename: str, chunk_size: int = 10000) -> Iterator[List[str]]:
    """Read values from a text file in chunks, one value per line.

    Only the line ending is removed, so values differing in leading or
    trailing whitespace stay distinct. Empty lines are skipped. Files
    ending in .gz are decompressed; "-" reads stdin.

    Raises:
        UnicodeDecodeError: If the input is not valid UTF-8

    Args:
        filename: Path to the input file, or "-" for stdin
        chunk_size: Maximum number of values per yielded list

    Yields:
        Lists of at most chunk_size values
    """
    if filename == "-":
        yield from _chunk_lines(sys.stdin, chunk_size)
        return

    opener = gzip.open if filename.endswith(".gz") else open
    with opener(filename, "rt", encoding="utf-8") as f:
        yield from _chunk_lines(f, chunk_size)


def _chunk_lines(lines, chunk_size: int) -> Iterator[List[str]]:
    values = []
    for line in lines:
        value = line.rstrip("\r\n")
        if not value:
            continue
        values.append(value)
        if len(values) >= chunk_size:
            yield values
            values = []
    if values:  # Yield any remaining values
        yield values
