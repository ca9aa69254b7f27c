"""Provide the subcommands of the txtar-tool command line tool.
"""

import argparse
import importlib
import logging
import os.path
import sys
import warnings
from txtar.config import Config
from txtar.exception import *

log = logging.getLogger(__name__)
subcmds = ( "create", "extract", "ls", "info", )

def showwarning(message, category, filename, lineno, file=None, line=None):
    """Display ArchiveWarning in a somewhat more user friendly manner.
    All other warnings are formatted the standard way.
    """
    # This is a modified version of the function of the same name from
    # the Python standard library warnings module.
    if file is None:
        file = sys.stderr
        if file is None:
            # sys.stderr is None when run with pythonw.exe - warnings get lost
            return
    try:
        if issubclass(category, ArchiveWarning):
            prog = os.path.basename(sys.argv[0])
            s = "%s: %s\n" % (prog, message)
        else:
            s = warnings.formatwarning(message, category,
                                       filename, lineno, line)
        file.write(s)
    except OSError:
        pass # the file (probably stderr) is invalid - this warning gets lost.

def txtar_tool(argv=None):
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    warnings.showwarning = showwarning

    argparser = argparse.ArgumentParser()
    argparser.add_argument('-v', '--verbose', action='store_true',
                           help=("verbose diagnostic output"))
    argparser.add_argument('--encoding',
                           help=("text encoding of archives and files"))
    subparsers = argparser.add_subparsers(title='subcommands', dest='subcmd')
    for sc in subcmds:
        m = importlib.import_module('txtar.cli.%s' % sc)
        m.add_parser(subparsers)
    args = argparser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
    if not hasattr(args, "func"):
        argparser.error("subcommand is required")

    try:
        config = Config(args)
        log.debug("configuration files read: %s",
                  ", ".join(config.config_file) or "none")
        status = args.func(args, config)
    except ConfigError as e:
        print("%s: configuration error: %s" % (argparser.prog, e),
              file=sys.stderr)
        sys.exit(2)
    except ArchiveError as e:
        print("%s %s: error: %s" % (argparser.prog, args.subcmd, e),
              file=sys.stderr)
        sys.exit(1)
    sys.exit(status)
