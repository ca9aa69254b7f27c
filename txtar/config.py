"""Manage configuration.

.. note::
   This module is intended as a helper for the internal use in the
   command line tool.  It is not considered to be part of the API of
   txtar-tools.  Most users will not need to use it directly or even
   care about it.
"""

import codecs
from collections import ChainMap
import configparser
import os
from txtar.exception import ConfigError


def get_config_file():
    try:
        return os.environ['TXTAR_CFG']
    except KeyError:
        return os.path.expanduser("~/.txtar.cfg")

def text_encoding(value):
    """Check that value names a known text encoding.
    """
    try:
        return codecs.lookup(value).name
    except LookupError:
        raise ValueError("unknown encoding '%s'" % value)

def boolean(value):
    """Convert a configuration value to bool.
    """
    if isinstance(value, bool):
        return value
    try:
        return configparser.ConfigParser.BOOLEAN_STATES[value.lower()]
    except KeyError:
        raise ValueError("invalid boolean value '%s'" % value)

class Config(ChainMap):

    defaults = {
        'encoding': "utf-8",
        'comment': "",
        'overwrite': "yes",
    }
    config_section = "txtar"
    args_options = ('encoding', 'comment', 'overwrite')

    def __init__(self, args, config_file=None):
        args_cfg = { k:vars(args)[k]
                     for k in self.args_options
                     if vars(args).get(k) is not None }
        super().__init__({}, args_cfg)
        if config_file is None:
            config_file = get_config_file()
        cp = configparser.ConfigParser(comment_prefixes=('#', '!'),
                                       interpolation=None)
        try:
            self.config_file = cp.read(config_file)
        except configparser.Error as e:
            raise ConfigError(str(e))
        try:
            self.maps.append(cp[self.config_section])
        except KeyError:
            pass
        self.maps.append(self.defaults)

    def get(self, key, required=False, subst=True, type=None):
        value = super().get(key)
        if value is None:
            if required:
                raise ConfigError("%s not specified" % key)
        else:
            if subst:
                try:
                    value = value % self
                except (KeyError, ValueError, TypeError) as e:
                    raise ConfigError("%s: invalid substitution in '%s': %s"
                                      % (key, value, e))
            if type:
                value = self._convert(key, type, value)
        return value

    @staticmethod
    def _convert(key, type, value):
        try:
            return type(value)
        except ValueError as e:
            raise ConfigError("%s: %s" % (key, e))

    @property
    def encoding(self):
        return self.get('encoding', required=True, type=text_encoding)

    @property
    def comment(self):
        return self.get('comment', subst=False)

    @property
    def overwrite(self):
        return self.get('overwrite', required=True, type=boolean)
