"""pytest configuration.
"""

import os
from pathlib import Path
import shutil
import subprocess
import sys
import tempfile
import pytest
import txtar


__all__ = [
    'DataDir', 'DataContentFile', 'DataSymLink',
    'callscript', 'get_output', 'gettestdata', 'readtestdata',
    'setup_testdata',
]

_cleanup = True
testdir = Path(__file__).parent

def pytest_addoption(parser):
    parser.addoption("--no-cleanup", action="store_true", default=False,
                     help="do not clean up temporary data after the test.")

def pytest_configure(config):
    global _cleanup
    _cleanup = not config.getoption("--no-cleanup")

class TmpDir(object):
    """Provide a temporary directory.
    """
    def __init__(self):
        self.dir = Path(tempfile.mkdtemp(prefix="txtar-tools-test-"))
    def cleanup(self):
        if self.dir and _cleanup:
            shutil.rmtree(self.dir)
        self.dir = None
    def __enter__(self):
        return self.dir
    def __exit__(self, type, value, tb):
        self.cleanup()
    def __del__(self):
        self.cleanup()

@pytest.fixture(scope="module")
def tmpdir(request):
    with TmpDir() as td:
        yield td

@pytest.fixture(scope="function")
def testname(request):
    return request.function.__name__

def gettestdata(fname):
    path = testdir / "data" / fname
    assert path.is_file()
    return path

def readtestdata(fname):
    with gettestdata(fname).open("rt", encoding="utf-8", newline="") as f:
        return f.read()

class DataItem:

    def __init__(self, path):
        self.path = path

    def create(self, main_dir):
        raise NotImplementedError

class DataDir(DataItem):

    def create(self, main_dir):
        path = main_dir / self.path
        path.mkdir(parents=True, exist_ok=True)

class DataContentFile(DataItem):

    def __init__(self, path, data):
        super().__init__(path)
        self.data = data

    def create(self, main_dir):
        path = main_dir / self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        mode = "wb" if isinstance(self.data, bytes) else "wt"
        with path.open(mode) as f:
            f.write(self.data)

class DataSymLink(DataItem):

    def __init__(self, path, target):
        super().__init__(path)
        self.target = target

    def create(self, main_dir):
        path = main_dir / self.path
        path.parent.mkdir(parents=True, exist_ok=True)
        path.symlink_to(self.target)

def setup_testdata(main_dir, items):
    for item in sorted(items, key=lambda i: i.path, reverse=True):
        item.create(main_dir)

def callscript(scriptname, args, returncode=0,
               stdin=None, stdout=None, stderr=None, env=None, cwd=None):
    try:
        script_dir = Path(os.environ['BUILD_SCRIPTS_DIR'])
    except KeyError:
        script_dir = testdir.parent / "scripts"
    script = script_dir / scriptname
    if not script.is_file():
        pytest.skip("script %s not found." % script)
    cmd = [sys.executable, str(script)] + args
    cmd_env = dict(os.environ)
    # Make sure the script finds the package under test.
    pkgdir = str(Path(txtar.__file__).resolve().parent.parent)
    cmd_env['PYTHONPATH'] = os.pathsep.join(
        filter(None, [pkgdir, cmd_env.get('PYTHONPATH')]))
    # Do not pick up the configuration of the user running the tests.
    cmd_env['TXTAR_CFG'] = os.devnull
    cmd_env['PYTHONIOENCODING'] = "utf-8"
    if env:
        cmd_env.update(env)
    print("\n>", *cmd)
    retcode = subprocess.call(cmd, stdin=stdin, stdout=stdout, stderr=stderr,
                              env=cmd_env, cwd=cwd)
    assert retcode == returncode

def get_output(fileobj):
    while True:
        line = fileobj.readline()
        if not line:
            break
        line = line.strip()
        print("< %s" % line)
        yield line

def pytest_report_header(config):
    """Add information on the package version used in the tests.
    """
    modpath = Path(txtar.__file__).resolve().parent
    return [ "txtar-tools: %s" % (txtar.__version__),
             "             %s" % (modpath)]
