"""
Parser and writer settings read from a ConfigObj file, e.g.:

    [parser]
    numbers = default        # or decimal, hex

    [writer]
    indent = tab             # or a number of spaces
    inline_threshold = 72
    preserve_comments = True
    canonical_strings = False

Anything left out keeps its default.
"""
from configobj import ConfigObj, ConfigObjError, Section

from . import log
from .errors import ConfigError
from .parser import NUMBER_PATTERNS
from .writer import WriterOptions


def _section(config, name):
    section = config.get(name, {})
    if not isinstance(section, Section) and section != {}:
        raise ConfigError(f'[{name}] should be a section, not {section!r}')
    return section


def _convert(section, key, how):
    try:
        return getattr(section, how)(key)
    except ValueError as e:
        raise ConfigError(f'bad value for {key}: {section[key]!r}') from e


def _indent(value):
    if value == 'tab':
        return '\t'
    try:
        n = int(value)
    except ValueError:
        n = -1
    if n < 0:
        raise ConfigError(f"indent should be 'tab' or a number of spaces, not {value!r}")
    return ' ' * n


def load_options(infile=None):
    '''
    Read settings from infile (a filename, or a list of lines) and return
    (number predicate, WriterOptions).  A missing file gives the defaults.
    '''
    try:
        config = ConfigObj(infile=infile)
    except (ConfigObjError, IOError) as e:
        raise ConfigError(f'cannot read config {infile!r}: {e}') from e

    parser = _section(config, 'parser')
    numbers = parser.get('numbers', 'default')
    number = NUMBER_PATTERNS.get(numbers)
    if number is None:
        choices = ', '.join(sorted(NUMBER_PATTERNS))
        raise ConfigError(f'numbers should be one of {choices}, not {numbers!r}')

    writer = _section(config, 'writer')
    options = WriterOptions()
    if 'indent' in writer:
        options.indent = _indent(writer['indent'])
    if 'inline_threshold' in writer:
        options.inline_threshold = _convert(writer, 'inline_threshold', 'as_int')
    for flag in ('preserve_comments', 'canonical_strings'):
        if flag in writer:
            setattr(options, flag, _convert(writer, flag, 'as_bool'))

    log.debug(lambda: f'config {infile!r}: numbers={numbers} {options!r}')
    return number, options
