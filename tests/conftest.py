"""
pytest configuration.
项目根目录（core/, config/, utils/, main.py）加入 sys.path
"""
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).parent.parent


def pytest_configure(config):
    if str(PROJECT_ROOT) not in sys.path:
        sys.path.insert(0, str(PROJECT_ROOT))


@pytest.fixture
def postfix_of():
    """中缀文本 -> 后缀Token序列"""
    from core import tokenize, convert_infix_to_postfix

    def _postfix_of(expression):
        return convert_infix_to_postfix(tokenize(expression))
    return _postfix_of
