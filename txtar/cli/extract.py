"""Implement the extract subcommand.
"""

import logging
from pathlib import Path
from txtar.archive import Archive

log = logging.getLogger(__name__)


def extract(args, config):
    archive = Archive().open(args.archive, encoding=config.encoding)
    log.info("extracting %d files from %s into %s",
             len(archive.files), args.archive, args.directory)
    archive.materialize(args.directory, overwrite=config.overwrite,
                        encoding=config.encoding)
    return 0

def add_parser(subparsers):
    parser = subparsers.add_parser('extract',
                                   help="write the files of the archive")
    parser.add_argument('--no-overwrite', action='store_const',
                        const='no', dest='overwrite',
                        help=("fail rather than replacing existing files"))
    parser.add_argument('archive', type=Path,
                        help=("path to the archive file"))
    parser.add_argument('directory', type=Path, nargs='?', default=Path("."),
                        help=("target directory, default: "
                              "the current directory"))
    parser.set_defaults(func=extract)
