from pathlib import Path
from typing import Callable, List

import pytest


@pytest.fixture
def make_files(tmp_path) -> Callable[..., List[Path]]:
    """Create empty files (content = own name) in tmp_path"""

    def _make(*names: str) -> List[Path]:
        paths = []
        for name in names:
            path = tmp_path / name
            path.write_text(name)
            paths.append(path)
        return paths

    return _make
