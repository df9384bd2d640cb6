import os
import sys


class Environment_error(Exception):
    pass

class Invalid_environment_value(Environment_error):
    def __init__(self, variable, value, expected):
        super().__init__(variable, value, expected)
        self.variable = variable
        self.value = value
        self.expected = expected

    def what(self):
        return 'invalid value of {}: {} (expected {})'.format(
            self.variable,
            repr(self.value),
            self.expected,
        )


DEFAULT_BINARY_EXT = '.pyc'
DEFAULT_C_EXT = '.c'
DEFAULT_OPTIMIZE = 0

COLOUR_ALWAYS = 'always'
COLOUR_NEVER = 'never'
COLOUR_AUTO = 'auto'
COLOUR_MODES = (
    COLOUR_ALWAYS,
    COLOUR_NEVER,
    COLOUR_AUTO,
)

TRUTHY = ('1', 'true', 'yes', 'on',)


def flag(variable):
    return (os.environ.get(variable, '').strip().lower() in TRUTHY)

def binary_ext():
    return os.environ.get('SCRIPTC_BINARY_EXT', DEFAULT_BINARY_EXT)

def c_ext():
    return os.environ.get('SCRIPTC_C_EXT', DEFAULT_C_EXT)

def optimize():
    v = os.environ.get('SCRIPTC_OPTIMIZE')
    if not v:
        return DEFAULT_OPTIMIZE
    try:
        level = int(v)
    except ValueError:
        level = None
    if level not in (-1, 0, 1, 2):
        raise Invalid_environment_value('SCRIPTC_OPTIMIZE', v, '-1, 0, 1, or 2')
    return level

def colour_mode():
    v = os.environ.get('SCRIPTC_COLOUR', COLOUR_AUTO).strip().lower()
    if v not in COLOUR_MODES:
        raise Invalid_environment_value(
            'SCRIPTC_COLOUR', v, ', '.join(COLOUR_MODES))
    return v

def colour(stream = None):
    # Unknown modes fall back to auto here. Use colour_mode() to validate.
    try:
        v = colour_mode()
    except Invalid_environment_value:
        v = COLOUR_AUTO
    if v == COLOUR_AUTO:
        stream = (stream if stream is not None else sys.stderr)
        isatty = getattr(stream, 'isatty', None)
        return bool(isatty is not None and isatty())
    return (v == COLOUR_ALWAYS)

def verbose():
    return flag('SCRIPTC_VERBOSE')

def debugging():
    return flag('SCRIPTC_DEBUG')

# Variables to consider:
#
#   SCRIPTC_BINARY_EXT, SCRIPTC_C_EXT
#       Extensions used when the output file name is derived from the input
#       file name.
#
#   SCRIPTC_OPTIMIZE
#       Optimisation level passed to the bytecode compiler.
#
#   SCRIPTC_COLOUR
#       Colouring of diagnostics: always, never, or auto.
#
#   SCRIPTC_VERBOSE, SCRIPTC_DEBUG
#       Enable additional chatter on standard error.
