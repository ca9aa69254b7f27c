"""Exception handling.
"""

class _BaseException(Exception):
    """An exception that tries to suppress misleading context.

    `Exception Chaining and Embedded Tracebacks`_ has been introduced
    with Python 3.  Unfortunately the result is completely misleading
    most of the times.  This class supresses the context in
    :meth:`__init__`.

    .. _Exception Chaining and Embedded Tracebacks: https://www.python.org/dev/peps/pep-3134/

    """
    def __init__(self, *args):
        super().__init__(*args)
        if hasattr(self, '__cause__'):
            self.__cause__ = None

class ConfigError(_BaseException):
    pass

class ArchiveError(_BaseException):
    pass

class ArchiveCreateError(ArchiveError):
    pass

class ArchiveReadError(ArchiveError):
    pass

class MaterializeError(ArchiveError):
    """Writing an entry of the archive to the file system failed.

    The name of the offending entry is kept in :attr:`name`, the
    underlying :exc:`OSError`, if any, in :attr:`oserror`.
    """
    def __init__(self, name, oserror=None, message=None):
        self.name = name
        self.oserror = oserror
        if message is None:
            if oserror is not None and oserror.strerror:
                message = oserror.strerror
            else:
                message = str(oserror)
        super().__init__("%s: %s" % (name, message))

class DirEscapeError(MaterializeError):
    def __init__(self, name):
        super().__init__(name, message="refusing to write outside "
                         "of the target directory")

class ArchiveWarning(Warning):
    pass
