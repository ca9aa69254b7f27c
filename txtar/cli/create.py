"""Implement the create subcommand.
"""

import logging
from pathlib import Path
from txtar.archive import Archive

log = logging.getLogger(__name__)


def create(args, config):
    log.info("creating archive %s", args.archive)
    archive = Archive().create(args.files, basedir=args.basedir,
                               comment=config.comment,
                               encoding=config.encoding)
    archive.save(args.archive, overwrite=args.force,
                 encoding=config.encoding)
    return 0

def add_parser(subparsers):
    parser = subparsers.add_parser('create', help="create the archive")
    parser.add_argument('--comment',
                        help=("comment to put at the head of the archive"))
    parser.add_argument('--basedir', type=Path,
                        help=("names in the archive are taken relative "
                              "to this directory"))
    parser.add_argument('-f', '--force', action='store_true',
                        help=("overwrite the archive file if it exists"))
    parser.add_argument('archive', type=Path,
                        help=("path to the archive file"))
    parser.add_argument('files', nargs='+', type=Path,
                        help="files to add to the archive")
    parser.set_defaults(func=create)
