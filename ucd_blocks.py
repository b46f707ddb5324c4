import bisect
import contextlib
import enum
import re
from typing import NamedTuple

import requests

LATEST_URL = 'https://www.unicode.org/Public/UCD/latest/ucd/Blocks.txt'
NO_BLOCK = 'No_Block'

U32_MAX = 0xFFFFFFFF
HEX_RE = re.compile(r'^\+?[0-9a-fA-F]+$')


# 错误类型
class BlocksError(Exception):
    @property
    def source(self):
        return self.__cause__


class ParseErrorKind(enum.Enum):
    NO_SEMICOLON = 'no semicolon'
    NO_DOT_DOT = 'no `..` in range'
    INVALID_INTEGER = 'one end of range is not a valid hexadecimal integer'

    def __str__(self):
        return self.value


class ParseError(BlocksError):
    def __init__(self, line: int, kind: ParseErrorKind):
        super().__init__(line, kind)
        self.line = line
        self.kind = kind

    def __str__(self):
        return f'invalid Blocks.txt data on line {self.line + 1}'


class FromFileErrorKind(enum.Enum):
    READ_FILE = 'read file'
    PARSE = 'parse'


class FromFileError(BlocksError):
    def __init__(self, path, kind: FromFileErrorKind):
        super().__init__(path, kind)
        self.path = path
        self.kind = kind

    def __str__(self):
        return f'error reading `{self.path}`'


class DownloadErrorKind(enum.Enum):
    REQUEST = 'request'
    READ_BODY = 'read body'
    PARSE = 'parse'


class DownloadError(BlocksError):
    def __init__(self, url: str, kind: DownloadErrorKind):
        super().__init__(url, kind)
        self.url = url
        self.kind = kind

    def __str__(self):
        return 'failed to download Blocks.txt from the Unicode website'


# 解析
class BlockEntry(NamedTuple):
    start: int
    end: int
    name: str

    @property
    def range(self) -> tuple[int, int]:
        return self.start, self.end

    def contains(self, code):
        return self.start <= code <= self.end


def parse_hex(string: str) -> int:
    if not HEX_RE.search(string):
        raise ValueError(f'invalid digit found in {string!r}')
    value = int(string, 16)
    if value > U32_MAX:
        raise ValueError(f'number too large to fit in 32 bits: {string!r}')
    return value


def parse(text: str) -> list[BlockEntry]:
    """
    Parse the contents of a ``Blocks.txt`` file.

    Lines are numbered from 0 in raw input order, so skipped blank and
    comment lines still count. The first malformed line raises
    ``ParseError`` and nothing is returned.
    """
    entries = []
    for i, line in enumerate(text.split('\n')):
        line = line.removesuffix('\r').split('#', 1)[0]
        if not line:
            continue

        range_part, sep, name = line.partition(';')
        if not sep:
            raise ParseError(i, ParseErrorKind.NO_SEMICOLON)
        range_part, name = range_part.strip(), name.strip()

        start, sep, end = range_part.partition('..')
        if not sep:
            raise ParseError(i, ParseErrorKind.NO_DOT_DOT)

        try:
            start, end = parse_hex(start), parse_hex(end)
        except ValueError as e:
            raise ParseError(i, ParseErrorKind.INVALID_INTEGER) from e

        entries.append(BlockEntry(start, end, name))
    return entries


# 查询
class Blocks:
    """
    Read-only table of Unicode blocks.

    Entries keep the order of the source file. Lookups assume they are
    ascending and disjoint, which holds for the UCD data; this is not checked.
    """

    __slots__ = ('_entries', '_starts')

    def __init__(self, entries=()):
        self._entries = tuple(BlockEntry(*entry) for entry in entries)
        self._starts = [entry.start for entry in self._entries]

    @classmethod
    def from_entries(cls, entries):
        return cls(entries)

    @classmethod
    def from_str(cls, text: str) -> 'Blocks':
        return cls(parse(text))

    @classmethod
    def from_file(cls, path) -> 'Blocks':
        try:
            with open(path, encoding='utf-8') as f:
                data = f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise FromFileError(path, FromFileErrorKind.READ_FILE) from e

        try:
            return cls.from_str(data)
        except ParseError as e:
            raise FromFileError(path, FromFileErrorKind.PARSE) from e

    @classmethod
    def download(cls, session=None, url=LATEST_URL, timeout=None) -> 'Blocks':
        """Fetch ``Blocks.txt`` with a single GET and parse it."""
        get = session.get if session is not None else requests.get
        try:
            r = get(url, stream=True, timeout=timeout)
        except requests.RequestException as e:
            raise DownloadError(url, DownloadErrorKind.REQUEST) from e

        with contextlib.closing(r):
            try:
                r.raise_for_status()
            except requests.RequestException as e:
                raise DownloadError(url, DownloadErrorKind.REQUEST) from e

            try:
                text = r.content.decode('utf-8')
            except (requests.RequestException, UnicodeDecodeError) as e:
                raise DownloadError(url, DownloadErrorKind.READ_BODY) from e

        try:
            return cls.from_str(text)
        except ParseError as e:
            raise DownloadError(url, DownloadErrorKind.PARSE) from e

    @property
    def entries(self) -> tuple[BlockEntry, ...]:
        return self._entries

    def block_of(self, code) -> str:
        if isinstance(code, str):
            code = ord(code)
        index = bisect.bisect_right(self._starts, code) - 1

        if index != -1 and code <= self._entries[index].end:
            return self._entries[index].name
        return NO_BLOCK

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self._entries)

    def __eq__(self, other):
        if not isinstance(other, Blocks):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self):
        return hash(self._entries)

    def __repr__(self):
        return f'<Blocks: {len(self._entries)} ranges>'
