import sys, os

# Ensure src and the repo root (for tests.helpers) are on path
ROOT = os.path.dirname(os.path.dirname(__file__))
SRC = os.path.join(ROOT, 'src')
for path in (SRC, ROOT):
    if path not in sys.path:
        sys.path.insert(0, path)

from tests.helpers import check_board, play

__all__ = [
    "check_board",
    "play",
]
