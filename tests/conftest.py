import os

import pytest

DATA_FOLDER = os.path.join(os.path.dirname(__file__), 'data')


@pytest.fixture
def blocks_path():
    return os.path.join(DATA_FOLDER, 'Blocks.txt')


@pytest.fixture
def blocks_text(blocks_path):
    with open(blocks_path, encoding='utf-8') as f:
        return f.read()
