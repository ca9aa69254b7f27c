"""Test warnings issued by the command line tool.
"""

from pathlib import Path
from tempfile import TemporaryFile
import pytest
from txtar import Archive, File
from conftest import *


testdata = [
    DataDir(Path("base")),
    DataContentFile(Path("base", "msg.txt"), "Hello world!\n"),
    DataContentFile(Path("base", "inner.txtar"), "-- inner.txt --\ninner\n"),
    DataSymLink(Path("base", "s.txt"), Path("msg.txt")),
]

@pytest.fixture(scope="module")
def test_dir(tmpdir):
    setup_testdata(tmpdir, testdata)
    return tmpdir

def test_cli_warn_create(test_dir, testname):
    """Create an archive from a directory containing a symlink and a
    file that looks like an archive itself.

    txtar-tool.py should issue warnings, but otherwise proceed to
    create the archive.
    """
    name = "%s.txtar" % testname
    with TemporaryFile(mode="w+t", dir=test_dir) as f:
        args = ["create", name, "base"]
        callscript("txtar-tool.py", args, stderr=f, cwd=test_dir)
        f.seek(0)
        lines = [l for l in get_output(f) if not l.startswith("INFO:")]
    assert lines == [
        ("txtar-tool.py: base/inner.txtar: contains a file marker line, "
         "it will not read back as written"),
        "txtar-tool.py: base/s.txt: symbolic link ignored",
    ]
    archive = Archive().open(test_dir / name)
    assert [f.name for f in archive.files] == [
        "base/inner.txtar", "inner.txt", "base/msg.txt"
    ]
