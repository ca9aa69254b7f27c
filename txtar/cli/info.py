"""Implement the info subcommand.
"""

from pathlib import Path
from txtar.archive import Archive
from txtar.exception import ArchiveReadError
from txtar.tools import count_lines


def info(args, config):
    archive = Archive().open(args.archive, encoding=config.encoding)
    fi = archive.find(args.entry)
    if fi is None:
        raise ArchiveReadError("%s: not found in archive" % args.entry)
    count = sum(1 for f in archive.files if f.name == args.entry)
    infolines = []
    infolines.append("Name:   %s" % fi.name)
    infolines.append("Size:   %d" % len(fi.data.encode(config.encoding)))
    infolines.append("Lines:  %d" % count_lines(fi.data))
    if count > 1:
        infolines.append("Copies: %d (showing the last one)" % count)
    print(*infolines, sep="\n")
    return 0

def add_parser(subparsers):
    parser = subparsers.add_parser('info',
                                   help=("show informations about "
                                         "an entry in the archive"))
    parser.add_argument('archive', type=Path,
                        help=("path to the archive file"))
    parser.add_argument('entry',
                        help=("name of the entry"))
    parser.set_defaults(func=info)
