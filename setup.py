#! /usr/bin/python
"""Tools for txtar archives

This package provides tools for reading and writing txtar archives.
A txtar archive is a simple text format that packs a comment and a
sequence of named text files into a single text file, designed to be
easy to read, edit and diff.

The package provides a command line tool to enable the following
tasks:

+ Create an archive from a list of files.

+ Extract the files of an archive into a directory.

+ List the contents of the archive.

+ Display details on a file in an archive.
"""

import logging
from pathlib import Path
import setuptools
from setuptools import setup
import setuptools.command.build_py
import setuptools.command.sdist
try:
    import distutils_pytest
    cmdclass = distutils_pytest.cmdclass
except (ImportError, AttributeError):
    cmdclass = dict()
try:
    import setuptools_scm
    version = setuptools_scm.get_version()
except (ImportError, LookupError):
    try:
        import _meta
        version = _meta.version
    except ImportError:
        logging.warning("warning: cannot determine version number")
        version = "0.0"

docstring = __doc__
log = logging.getLogger("setup")


class meta(setuptools.Command):

    description = "generate meta files"
    user_options = []
    init_template = '''"""%(doc)s"""

__version__ = "%(version)s"

from txtar.archive import Archive, File, parse, serialize, materialize
from txtar.exception import *
'''
    meta_template = '''
version = "%(version)s"
'''

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        version = self.distribution.get_version()
        log.info("version: %s", version)
        values = {
            'version': version,
            'doc': docstring.split("\n\nThe package provides")[0],
        }
        try:
            pkgname = self.distribution.packages[0]
        except IndexError:
            log.warning("warning: no package defined")
        else:
            pkgdir = Path(pkgname)
            if not pkgdir.is_dir():
                pkgdir.mkdir()
            with (pkgdir / "__init__.py").open("wt") as f:
                print(self.init_template % values, file=f)
        with Path("_meta.py").open("wt") as f:
            print(self.meta_template % values, file=f)


class sdist(setuptools.command.sdist.sdist):
    def run(self):
        self.run_command('meta')
        super().run()


class build_py(setuptools.command.build_py.build_py):
    def run(self):
        self.run_command('meta')
        super().run()


with Path("README.rst").open("rt", encoding="utf8") as f:
    readme = f.read()

setup(
    name = "txtar-tools",
    version = version,
    description = docstring.split("\n")[0],
    long_description = readme,
    long_description_content_type = "text/x-rst",
    license = "Apache-2.0",
    classifiers = [
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Operating System :: OS Independent",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: System :: Archiving",
        "Topic :: Text Processing",
    ],
    packages = ["txtar", "txtar.cli"],
    python_requires = ">=3.6",
    install_requires = ["PyYAML"],
    extras_require = {
        "test": ["pytest >= 3.0"],
    },
    scripts = ["scripts/txtar-tool.py"],
    cmdclass = dict(cmdclass, build_py=build_py, sdist=sdist, meta=meta),
)
