"""A collection of internal helper routines.

.. note::
   This module is intended for the internal use in txtar-tools and
   is not considered to be part of the API.  No effort will be made to
   keep anything in here compatible between different versions.
"""

import posixpath


MARKER = "-- "
MARKER_END = " --"


def fix_newline(s):
    """Return s with a final newline appended if it is not empty and
    does not already end with one.
    """
    if s and not s.endswith("\n"):
        s += "\n"
    return s


def find_marker(line):
    """Check whether line is a file marker line.

    Return the name enclosed in the marker, stripped of surrounding
    whitespace, or :const:`None` if line is not a marker.  Trailing
    whitespace, including the line terminator, is ignored.
    """
    if not line.startswith(MARKER):
        return None
    line = line.rstrip()
    if len(line) < len(MARKER) + len(MARKER_END):
        return None
    if not line.endswith(MARKER_END):
        return None
    return line[len(MARKER):-len(MARKER_END)].strip()


def marker_line(name):
    return "%s%s%s\n" % (MARKER, name, MARKER_END)


def clean_name(name):
    """Lexically normalize the name of an archive entry.

    >>> clean_name("a/./b//c")
    'a/b/c'
    >>> clean_name("bar/deep/../../../escaped.txt")
    '../escaped.txt'
    """
    return posixpath.normpath(name)


def is_escaping(name):
    """Check whether a normalized name would point outside of the
    directory it is relative to.
    """
    return (posixpath.isabs(name) or
            name == posixpath.pardir or
            name.startswith(posixpath.pardir + posixpath.sep))


def count_lines(data):
    return data.count("\n")
