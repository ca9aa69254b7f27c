"""Tools for txtar archives

This package provides tools for reading and writing txtar archives.
A txtar archive is a simple text format that packs a comment and a
sequence of named text files into a single text file, designed to be
easy to read, edit and diff."""

__version__ = "0.1.0"

from txtar.archive import Archive, File, parse, serialize, materialize
from txtar.exception import *

