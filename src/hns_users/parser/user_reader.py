"""Hack & Slash USER file reader.

The file is a flat array of fixed 320-byte blocks, one per account slot:

  handle (26 bytes, UTF-8, NUL padded)
  name   (30 bytes, cp1252, NUL padded)
  data   (264 bytes, fields at fixed offsets, doubles big-endian)

Design: decode_next() reads one block from a forward-only stream and
returns a User, EmptySlot, or EndOfStream. Everything above it is a
generator, so callers decide whether to collect the accounts or stream them.
"""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import BinaryIO

from hns_users.models.constants import (
    BLOCK_SIZE,
    DATA_LENGTH,
    HANDLE_LENGTH,
    NAME_ENCODING,
    NAME_LENGTH,
    armor_from_code,
    user_class_from_code,
    weapon_from_code,
)
from hns_users.models.progression import experience_needed
from hns_users.models.user import DecodeResult, EmptySlot, EndOfStream, User
from hns_users.parser.binary_reader import BinaryReader


logger = logging.getLogger(__name__)


def _uint8(reader: BinaryReader) -> int:
    return reader.uint8()


def _floored_double(reader: BinaryReader) -> float:
    return reader.floored_float64_be()


# Data region layout: (offset, field, decoder). Offsets are relative to the
# start of the 264-byte data region, not the block.
USER_FIELDS: tuple[tuple[int, str, Callable[[BinaryReader], object]], ...] = (
    (0x6C, "experience", _floored_double),
    (0x74, "gold", _floored_double),
    (0x7C, "bank", _floored_double),
    (0x84, "loan", _floored_double),
    (0x8D, "immortal", _uint8),
    (0x92, "user_class", lambda r: user_class_from_code(r.uint8())),
    (0x93, "level", _uint8),
    (0x95, "strength", _uint8),
    (0x96, "intelligence", _uint8),
    (0x97, "dexterity", _uint8),
    (0x98, "charisma", _uint8),
    (0x9B, "weapon", lambda r: weapon_from_code(r.uint8())),
    (0x9C, "armor", lambda r: armor_from_code(r.uint8())),
)


class TruncatedBlockError(ValueError):
    """The stream ended part way through a block."""

    def __init__(self, offset: int, expected: int, received: int) -> None:
        super().__init__(
            f"Truncated block at offset {offset}: "
            f"expected {expected} bytes, got {received}"
        )
        self.offset = offset
        self.expected = expected
        self.received = received


class NoUsersError(ValueError):
    """No accounts survived decoding and filtering."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read up to *size* bytes, retrying short reads until EOF."""
    chunks: list[bytes] = []
    received = 0
    while received < size:
        chunk = stream.read(size - received)
        if not chunk:
            break
        chunks.append(chunk)
        received += len(chunk)
    return b"".join(chunks)


def _decode_data(data: bytes) -> dict[str, object]:
    reader = BinaryReader(data)
    fields: dict[str, object] = {}
    for offset, name, decode in USER_FIELDS:
        reader.seek(offset)
        fields[name] = decode(reader)
    return fields


def decode_next(stream: BinaryIO, *, offset: int = 0) -> DecodeResult:
    """Decode the next block from *stream*.

    Args:
        stream: Binary stream positioned at a block boundary.
        offset: Stream offset of that boundary, used in error messages.

    Returns:
        User for an occupied slot, EmptySlot for an empty or unreadable
        handle, EndOfStream if the stream is exhausted at the boundary.

    Raises:
        TruncatedBlockError: If the stream ends inside the block.
    """
    received = 0
    buffers: list[bytes] = []
    for size in (HANDLE_LENGTH, NAME_LENGTH, DATA_LENGTH):
        buf = _read_exact(stream, size)
        if not buf and received == 0:
            return EndOfStream()
        received += len(buf)
        if len(buf) != size:
            raise TruncatedBlockError(offset, BLOCK_SIZE, received)
        buffers.append(buf)
    handle_buf, name_buf, data_buf = buffers

    try:
        handle = handle_buf.decode("utf-8")
    except UnicodeDecodeError:
        logger.warning("Skipping block at offset %d: handle is not valid UTF-8", offset)
        return EmptySlot(reason="invalid handle encoding")

    name = name_buf.decode(NAME_ENCODING, errors="replace")

    handle = handle.rstrip("\x00")
    name = name.rstrip("\x00")
    if not handle:
        return EmptySlot(reason="empty handle")

    fields = _decode_data(data_buf)
    return User(
        handle=handle,
        name=name,
        experience_needed=experience_needed(fields["level"], fields["intelligence"]),
        **fields,
    )


def iter_decode(stream: BinaryIO) -> Iterator[User | EmptySlot]:
    """Yield the decoded result of every block, in file order.

    Stops at EndOfStream. A truncated block raises TruncatedBlockError
    after the complete blocks before it have been yielded.
    """
    offset = 0
    while True:
        result = decode_next(stream, offset=offset)
        if isinstance(result, EndOfStream):
            return
        yield result
        offset += BLOCK_SIZE


def iter_users(stream: BinaryIO, *, include_placeholder: bool = False) -> Iterator[User]:
    """Yield occupied accounts, skipping empty slots and the dummy account."""
    for index, result in enumerate(iter_decode(stream)):
        if isinstance(result, EmptySlot):
            logger.debug("Slot %d is empty (%s)", index, result.reason)
            continue
        if result.is_placeholder and not include_placeholder:
            logger.debug("Slot %d is the placeholder account %r", index, result.handle)
            continue
        yield result


def read_users(stream: BinaryIO, *, include_placeholder: bool = False) -> list[User]:
    """Return all occupied accounts from *stream*. See iter_users()."""
    return list(iter_users(stream, include_placeholder=include_placeholder))


def load_users(path: Path) -> list[User]:
    """Read every account from the USER file at *path*.

    Raises:
        OSError: If the file cannot be opened or read.
        TruncatedBlockError: If the file ends part way through a block.
        NoUsersError: If the file holds no accounts.
    """
    with open(path, "rb") as f:
        users = read_users(f)
    if not users:
        raise NoUsersError(f"No users could be parsed from {path}")
    logger.info("Parsed %d users from %s", len(users), path)
    return users
