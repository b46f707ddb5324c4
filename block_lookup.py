import itertools
import re
import sys

from ucd_blocks import Blocks, BlocksError, LATEST_URL
from block_table import TableError, load_table

UNICODE_RE = re.compile(r'^([0-9a-fA-F]|10)?[0-9a-fA-F]{1,4}$')


def format_code(code):
    return 'U+' + hex(code)[2:].upper().zfill(4)


def group_by_block(blocks, codes):
    """把连续且属于同一区段的码位合并为 (起点, 终点, 区段名, 个数)。"""
    groups = []
    for name, g in itertools.groupby(codes, blocks.block_of):
        g = list(g)
        groups.append((g[0], g[-1], name, len(g)))
    return groups


def describe_error(error):
    lines = [str(error)]
    cause = error.__cause__
    while cause is not None:
        lines.append(f'  caused by: {cause}')
        cause = cause.__cause__
    return '\n'.join(lines)


def load_blocks(args):
    if args.blocks_file:
        return Blocks.from_file(args.blocks_file)
    if args.table:
        return load_table(args.table)
    print(f'正在下载 {args.url}……')
    return Blocks.download(url=args.url)


def read_codes(args):
    if args.rang:
        start, end = args.rang
        if start > end:
            raise ValueError(f'无效码位范围 {start:04X}..{end:04X}')
        return list(range(start, end + 1))
    if args.from_code_file:
        return list(map(
            lambda v: int(v, 16) if UNICODE_RE.search(v) else _ve(v),
            (v.strip() for v in args.from_code_file.read().split(',') if v.strip())
        ))
    if args.from_text_file:
        return list(map(ord, args.from_text_file.read()))
    return list(map(ord, args.chars))


def _ve(v):
    raise ValueError(f'无效Unicode码位 {v}')


def hex_number(number):
    if isinstance(number, int):
        return number
    return int(number, 16)


def build_parser():
    import argparse
    from argparse_range import range_action

    parser = argparse.ArgumentParser(description='查询字符所属的Unicode区段')
    source_group = parser.add_mutually_exclusive_group()
    source_group.add_argument('-b', '--blocks_file', type=str,
                              help='本地 Blocks.txt 的路径。')
    source_group.add_argument('-t', '--table', type=str,
                              help='由 build_blocks_table.py 生成的区段表（.mp.zlib）。')
    source_group.add_argument('-u', '--url', type=str, default=LATEST_URL,
                              help='下载 Blocks.txt 的地址，默认为最新版 UCD。')
    parser.add_argument('-e', '--each', action='store_true',
                        help='逐个码位输出，而不合并连续的同区段码位。')

    chars_group = parser.add_mutually_exclusive_group(required=True)
    chars_group.add_argument('-r', '--rang', type=hex_number,
                             nargs=2, action=range_action(0, 0x10FFFF),
                             help='要查询的码位范围，不带0x的十六进制数。')
    chars_group.add_argument('-fcf', '--from_code_file',
                             type=argparse.FileType('r', encoding='utf-8'),
                             help='通过一个写着Unicode编码（不带0x的十六进制数，多个编码间用「,」分隔）的文件获取要查询的字符。')
    chars_group.add_argument('-ftf', '--from_text_file',
                             type=argparse.FileType('r', encoding='utf-8'),
                             help='通过一个一般的文本文件获取要查询的字符。')
    chars_group.add_argument('-c', '--chars', type=str,
                             help='直接给出要查询的字符。')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        codes = read_codes(args)
    except ValueError as e:
        print(e, file=sys.stderr)
        return 1

    try:
        blocks = load_blocks(args)
    except (BlocksError, TableError, OSError) as e:
        print(describe_error(e), file=sys.stderr)
        return 1

    if args.each:
        for code in codes:
            print(f'{format_code(code)}  {blocks.block_of(code)}')
    else:
        for start, end, name, count in group_by_block(blocks, codes):
            span = format_code(start) if start == end else f'{format_code(start)}-{format_code(end)}'
            print(f'{span}  {name} ({count})')
    return 0


if __name__ == '__main__':
    sys.exit(main())
