import zlib

import msgpack
import pytest

from block_table import TableError, dump_table, load_table, pack_table, unpack_table
from ucd_blocks import Blocks


def test_table_restores_blocks(blocks_text, tmp_path):
    blocks = Blocks.from_str(blocks_text)
    path = tmp_path / 'Blocks.mp.zlib'
    dump_table(blocks, path)
    restored = load_table(path)
    assert restored == blocks
    assert restored.block_of('½') == 'Latin-1 Supplement'


def test_table_layout():
    data = pack_table(Blocks.from_str('0000..007F; Basic Latin'))
    assert msgpack.unpackb(zlib.decompress(data)) == [[0, 0x7F, 'Basic Latin']]


@pytest.mark.parametrize('data', [
    b'not compressed',
    zlib.compress(b'\xc1'),
    zlib.compress(msgpack.packb({'a': 1})),
    zlib.compress(msgpack.packb([[0, 'x', 'Basic Latin']])),
])
def test_corrupted_table(data):
    with pytest.raises(TableError):
        unpack_table(data)
