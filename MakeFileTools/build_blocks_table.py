import os
import sys

from ucd_blocks import Blocks, BlocksError
from block_table import dump_table

CUR_FOLDER = os.path.dirname(__file__)
BLOCKS_PATH = os.path.join(os.path.dirname(CUR_FOLDER), 'data', 'Blocks.txt')
OUT_PATH = os.path.join(os.path.dirname(CUR_FOLDER), 'ToolFiles', 'Blocks.mp.zlib')


def build_table(src=BLOCKS_PATH, out=OUT_PATH):
    blocks = Blocks.from_file(src)
    os.makedirs(os.path.dirname(out), exist_ok=True)
    dump_table(blocks, out)
    print(f'已写入 {len(blocks)} 个区段到 {out}')
    return blocks


if __name__ == '__main__':
    try:
        build_table()
    except BlocksError as e:
        print(f'{e}: {e.source}', file=sys.stderr)
        sys.exit(1)
