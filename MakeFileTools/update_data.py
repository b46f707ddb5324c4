import os

import requests

from ucd_blocks import LATEST_URL

CUR_FOLDER = os.path.dirname(__file__)
BLOCKS_PATH = os.path.join(os.path.dirname(CUR_FOLDER), 'data', 'Blocks.txt')


def update_blocks(path=BLOCKS_PATH, url=LATEST_URL):
    if os.path.exists(path):
        return False
    print('正在更新 Blocks.txt……')
    r = requests.get(url)
    r.raise_for_status()
    os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(r.content.decode('utf-8'))
    return True


if __name__ == '__main__':
    update_blocks()
