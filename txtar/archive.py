"""Provide the Archive class.

A txtar archive consists of a free form comment followed by a
sequence of file entries.  Each file entry starts with a marker line
of the form ``-- name --`` and continues up to the next marker line
or the end of the archive::

    comment
    -- hello.txt --
    Hello world!
    -- sub/dir/foo.txt --
    foo

There are no possible syntax errors: any text is a valid archive.
"""

import io
import logging
from os.path import curdir
from pathlib import Path
import stat
import warnings
from txtar.exception import *
from txtar.tools import (fix_newline, find_marker, marker_line,
                         clean_name, is_escaping)


log = logging.getLogger(__name__)

default_encoding = "utf-8"


def _ftype_str(mode):
    if stat.S_ISLNK(mode):
        return "symbolic link"
    elif stat.S_ISFIFO(mode):
        return "FIFO"
    elif stat.S_ISCHR(mode):
        return "character device file"
    elif stat.S_ISBLK(mode):
        return "block device file"
    elif stat.S_ISSOCK(mode):
        return "socket"
    else:
        return "unsuported type %x" % stat.S_IFMT(mode)


def _has_marker(text):
    return any(find_marker(l) is not None
               for l in io.StringIO(text, newline="\n"))


class File:
    """A file entry in a txtar archive.

    The data always ends with a newline if it is not empty, one is
    appended if missing.
    """

    def __init__(self, name, data=""):
        self.name = name
        self.data = data

    @property
    def data(self):
        return self._data

    @data.setter
    def data(self, data):
        self._data = fix_newline(data)

    def __eq__(self, other):
        if not isinstance(other, File):
            return NotImplemented
        return self.name == other.name and self.data == other.data

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.name, self.data)


class Archive:

    def __init__(self, comment="", files=()):
        self.path = None
        self.comment = comment
        self.files = list(files)

    @property
    def comment(self):
        return self._comment

    @comment.setter
    def comment(self, comment):
        self._comment = fix_newline(comment)

    def __eq__(self, other):
        if not isinstance(other, Archive):
            return NotImplemented
        return self.comment == other.comment and self.files == other.files

    def __repr__(self):
        return "%s(%r, %r)" % (type(self).__name__, self.comment, self.files)

    def __str__(self):
        return "".join(self._iterchunks())

    def _iterchunks(self):
        yield self.comment
        for fi in self.files:
            yield marker_line(fi.name)
            yield fi.data

    @classmethod
    def parse(cls, text):
        """Parse text into an archive.

        This never fails, any text is a valid archive.  The scan is in
        one of two states: collecting the lines of the comment or
        collecting the lines of the current file.  Each marker line
        closes the current file, if any, and starts a new one.
        """
        comment = []
        files = []
        name = None
        lines = comment
        # With newline="\n", lines are only split at "\n" and a "\r"
        # preceding it is kept in the line.
        for line in io.StringIO(text, newline="\n"):
            marker = find_marker(line)
            if marker is None:
                lines.append(line)
                continue
            if name is not None:
                files.append(File(name, "".join(lines)))
            name = marker
            lines = []
        if name is not None:
            files.append(File(name, "".join(lines)))
        return cls("".join(comment), files)

    def write(self, fileobj):
        """Serialize the archive into the text stream fileobj.
        """
        for chunk in self._iterchunks():
            fileobj.write(chunk)

    def find(self, name):
        """Return the file entry with the given name.

        If there are several entries with this name, the last one is
        returned, this is the one that ends up on disk when the
        archive is materialized.  Return :const:`None` if the name is
        not found.
        """
        for fi in reversed(self.files):
            if fi.name == name:
                return fi
        else:
            return None

    def open(self, path, encoding=None):
        path = Path(path)
        log.debug("reading archive %s", path)
        try:
            with path.open("rt", encoding=encoding or default_encoding,
                           newline="") as f:
                text = f.read()
        except OSError as e:
            raise ArchiveReadError(str(e))
        except UnicodeDecodeError as e:
            raise ArchiveReadError("%s: %s" % (path, e))
        archive = self.parse(text)
        self.comment = archive.comment
        self.files = archive.files
        self.path = path
        return self

    def save(self, path, overwrite=False, encoding=None):
        """Write the archive to a file.

        Refuse to replace an existing file unless overwrite is true.
        """
        path = Path(path)
        mode = "wt" if overwrite else "xt"
        log.debug("writing archive %s", path)
        try:
            with path.open(mode, encoding=encoding or default_encoding,
                           newline="") as f:
                self.write(f)
        except OSError as e:
            raise ArchiveCreateError(str(e))
        except UnicodeEncodeError as e:
            raise ArchiveCreateError("%s: %s" % (path, e))
        self.path = path
        return self

    def create(self, paths, basedir=None, comment="", encoding=None):
        """Create the archive from files on disk.

        Directories in paths are descended recursively in sorted
        order.  The names of the entries are the paths relative to
        basedir, which defaults to the current working directory.
        Symbolic links and special files are skipped with a warning.
        Names and contents that would not read back as written are
        added with a warning.
        """
        encoding = encoding or default_encoding
        basedir = Path(basedir) if basedir else Path(".")
        paths = [Path(p) for p in paths]
        self._check_paths(paths, basedir)
        if _has_marker(comment):
            warnings.warn(ArchiveWarning("comment contains a file marker "
                                         "line, it will not read back "
                                         "as written"))
        self.comment = comment
        self.files = []
        for p in self._iterpaths(paths):
            name = p.relative_to(basedir).as_posix()
            log.debug("adding %s as %s", p, name)
            if name != name.strip() or "\n" in name:
                warnings.warn(ArchiveWarning("%s: file name will not read "
                                             "back as written" % p))
            try:
                with p.open("rt", encoding=encoding, newline="") as f:
                    data = f.read()
            except OSError as e:
                raise ArchiveCreateError(str(e))
            except UnicodeDecodeError:
                raise ArchiveCreateError("%s: not a text file in encoding %s"
                                         % (p, encoding))
            if _has_marker(data):
                warnings.warn(ArchiveWarning("%s: contains a file marker "
                                             "line, it will not read back "
                                             "as written" % p))
            self.files.append(File(name, data))
        return self

    def _check_paths(self, paths, basedir):
        """Check the paths to be added to an archive for several error
        conditions.
        """
        if not paths:
            raise ArchiveCreateError("refusing to create an empty archive")
        for p in paths:
            if ".." in p.parts:
                raise ArchiveCreateError("invalid path '%s': "
                                         "must be normalized" % p)
            try:
                # This will raise ValueError if p does not start
                # with basedir:
                p.relative_to(basedir)
            except ValueError:
                raise ArchiveCreateError("invalid path '%s': must be a "
                                         "subpath of base directory %s"
                                         % (p, basedir))

    def _iterpaths(self, paths):
        for p in paths:
            try:
                mode = p.lstat().st_mode
            except OSError as e:
                raise ArchiveCreateError(str(e))
            if stat.S_ISDIR(mode):
                yield from self._iterpaths(sorted(p.iterdir()))
            elif stat.S_ISREG(mode):
                yield p
            else:
                warnings.warn(ArchiveWarning("%s: %s ignored"
                                             % (p, _ftype_str(mode))))

    def materialize(self, destination, overwrite=True, encoding=None):
        """Write each file of the archive into the directory destination.

        Files are written in archive order, a later entry replaces an
        earlier one having the same name.  Missing directories are
        created.  The comment is not written.

        Names are normalized first.  Absolute names and names pointing
        outside of destination are rejected with a
        :exc:`~txtar.exception.DirEscapeError`.  If overwrite is
        false, existing files are not replaced, a
        :exc:`~txtar.exception.MaterializeError` is raised instead.
        Processing stops at the first failing entry, files written so
        far are left in place.
        """
        destination = Path(destination)
        encoding = encoding or default_encoding
        mode = "wb" if overwrite else "xb"
        for fi in self.files:
            name = clean_name(fi.name)
            if is_escaping(name):
                raise DirEscapeError(name)
            if name == curdir:
                raise MaterializeError(fi.name, message="invalid file name")
            path = destination / name
            log.debug("writing %s", path)
            try:
                # Encode before opening, a failure must not truncate an
                # existing file.
                data = fi.data.encode(encoding)
                path.parent.mkdir(parents=True, exist_ok=True)
                with path.open(mode) as f:
                    f.write(data)
            except OSError as e:
                raise MaterializeError(fi.name, e)
            except ValueError as e:
                # UnicodeEncodeError or an embedded null byte in the name.
                raise MaterializeError(fi.name, message=str(e))


def parse(text):
    """Parse text into an :class:`Archive`.
    """
    return Archive.parse(text)

def serialize(archive):
    """Return the txtar text of archive.
    """
    return str(archive)

def materialize(archive, destination, overwrite=True, encoding=None):
    """Write the files of archive into the directory destination.

    See :meth:`Archive.materialize`.
    """
    archive.materialize(destination, overwrite=overwrite, encoding=encoding)
