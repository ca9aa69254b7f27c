"""Implement the ls subcommand.
"""

from pathlib import Path
import sys
import yaml
from txtar.archive import Archive
from txtar.tools import count_lines


def _size(fi, encoding):
    return len(fi.data.encode(encoding))

def ls_ls_format(archive, encoding):
    items = [ (_size(fi, encoding), fi.name) for fi in archive.files ]
    l_s = max((len(str(s)) for s, _ in items), default=0)
    format_str = "%%%dd  %%s" % l_s
    for i in items:
        print(format_str % i)

def ls_yaml_format(archive, encoding):
    items = [ {
        'name': fi.name,
        'size': _size(fi, encoding),
        'lines': count_lines(fi.data),
    } for fi in archive.files ]
    yaml.safe_dump(items, stream=sys.stdout, default_flow_style=False,
                   sort_keys=False, allow_unicode=True)

def ls(args, config):
    archive = Archive().open(args.archive, encoding=config.encoding)
    if args.format == 'ls':
        ls_ls_format(archive, config.encoding)
    elif args.format == 'yaml':
        ls_yaml_format(archive, config.encoding)
    else:
        raise ValueError("invalid format '%s'" % args.format)
    return 0

def add_parser(subparsers):
    parser = subparsers.add_parser('ls', help="list files in the archive")
    parser.add_argument('--format', choices=['ls', 'yaml'], default='ls',
                        help=("output style"))
    parser.add_argument('archive', type=Path,
                        help=("path to the archive file"))
    parser.set_defaults(func=ls)
