import re
from pathlib import Path

import treemerge


def test_version_matches_setup():
    setup_py = Path(__file__).parent.parent / 'setup.py'
    m = re.search(r"version='([^']+)'", setup_py.read_text())
    assert m is not None
    assert m.group(1) == treemerge.__version__
