"""Replace the managed blocks in a hosts file.

The sync of one file:
1. Read the current contents (a missing file counts as empty)
2. Remove every paragraph tagged by one of the blocks' labels, plus the blank line after it
3. Drop trailing blank lines
4. Append each block in order: a blank separator, the header comment and its lines
5. Write the file back if anything changed

All blocks of a file go through one read and at most one write, so an
unchanged membership list leaves the file untouched. Line endings outside
the managed blocks are left as they were read.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence

from zt_hosts.errors import FileAccessError
from zt_hosts.hostsfile import UNIX_EOL
from zt_hosts.hostsfile.blocks import remove_tagged, strip_trailing_blank

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HostFileTarget:
    """One file to keep in sync."""
    path: str
    label: str
    line_terminator: str = UNIX_EOL
    fqdn: bool = False
    exclude: tuple[str, ...] = ()


@dataclass(frozen=True)
class Block:
    """A labeled paragraph: header comment plus rendered lines."""
    label: str
    header: str
    lines: tuple[str, ...] = ()


def replace_blocks(
    content: str,
    blocks: Sequence[Block],
    eol: str = UNIX_EOL,
) -> str:
    """Return ``content`` with the blocks' old paragraphs replaced.

    Old paragraphs of every label are removed first; the new blocks are
    then appended in the given order, so the last block ends the file.
    """
    kept = content.splitlines(keepends=True)
    for block in blocks:
        kept = remove_tagged(kept, block.label)
    kept = strip_trailing_blank(kept)
    if kept and not kept[-1].endswith(("\n", "\r")):
        kept[-1] += eol

    out = "".join(kept)
    for i, block in enumerate(blocks):
        if kept or i:
            out += eol
        out += "".join(line + eol for line in [block.header, *block.lines])
    return out


def replace_block(
    content: str,
    label: str,
    header: str,
    lines: Sequence[str],
    eol: str = UNIX_EOL,
) -> str:
    """Return ``content`` with its ``label`` block replaced by a new one."""
    return replace_blocks(content, [Block(label, header, tuple(lines))], eol)


def read_target(path: Path | str) -> str:
    """Read a hosts file verbatim. A missing file reads as empty."""
    try:
        with open(path, newline="", errors="surrogateescape") as f:
            return f.read()
    except FileNotFoundError:
        return ""
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e


def write_target(path: Path | str, content: str) -> None:
    try:
        with open(path, "w", newline="", errors="surrogateescape") as f:
            f.write(content)
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e)) from e


def sync_target(
    target: HostFileTarget,
    header: str,
    lines: Sequence[str],
    dry_run: bool = False,
    leading: Sequence[Block] = (),
) -> str:
    """Rewrite the managed blocks of one target file.

    Args:
        target: File to sync; its label tags the main block.
        header: Header comment of the main block.
        lines: Rendered lines of the main block.
        dry_run: Compute the result without writing.
        leading: Blocks written ahead of the main block, in order.

    Returns:
        ``"updated"`` or ``"unchanged"``.

    Raises:
        FileAccessError: If the file cannot be read or written.
    """
    blocks = [*leading, Block(target.label, header, tuple(lines))]
    content = read_target(target.path)
    new_content = replace_blocks(content, blocks, target.line_terminator)
    if new_content == content:
        logger.debug("%s: %s block unchanged", target.path, target.label)
        return "unchanged"
    if not dry_run:
        write_target(target.path, new_content)
    logger.info("%s: wrote %s block, %d line(s)", target.path, target.label, len(lines))
    return "updated"
