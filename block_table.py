import zlib

import msgpack

from ucd_blocks import Blocks


class TableError(Exception):
    pass


def pack_table(blocks: Blocks) -> bytes:
    return zlib.compress(msgpack.packb([list(entry) for entry in blocks]))


def unpack_table(data: bytes) -> Blocks:
    try:
        rows = msgpack.unpackb(zlib.decompress(data))
    except (zlib.error, ValueError, msgpack.UnpackException) as e:
        raise TableError('corrupted block table') from e

    if not isinstance(rows, list) or not all(
        isinstance(row, list) and len(row) == 3
        and isinstance(row[0], int) and isinstance(row[1], int)
        and isinstance(row[2], str)
        for row in rows
    ):
        raise TableError('block table rows must be [start, end, name]')
    return Blocks.from_entries(rows)


def dump_table(blocks: Blocks, path):
    with open(path, 'wb') as f:
        f.write(pack_table(blocks))


def load_table(path) -> Blocks:
    with open(path, 'rb') as f:
        return unpack_table(f.read())
