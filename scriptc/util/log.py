import sys

import scriptc.util.colors


KINDS = {
    'error': 'red',
    'debug': 'green',
    'note': 'cyan',
}


def make_prefix(kind, path, pos):
    if path is not None and type(path) is not str:
        raise TypeError('invalid path: {}: {}'.format(
            type(path).__name__, path))
    if pos is not None and (type(pos) is not tuple or len(pos) != 2):
        raise TypeError('invalid position: {}: {}'.format(
            type(pos).__name__, pos))

    prefix = ''
    if path is not None:
        prefix = scriptc.util.colors.colorise('white', path)
    if pos is not None:
        prefix = '{}:{}:{}'.format(
            prefix,
            *pos,
        )

    if kind is not None:
        colored_kind = scriptc.util.colors.colorise(KINDS[kind], kind)
        if prefix:
            prefix = '{}: {}'.format(prefix, colored_kind)
        else:
            prefix = colored_kind

    return prefix

def _emit(kind, s, path, pos):
    sys.stderr.write('{}: {}\n'.format(
        make_prefix(kind, path, pos),
        s,
    ))

def error(s, path = None, pos = None):
    _emit('error', s, path, pos)

def debug(s, path = None, pos = None):
    _emit('debug', s, path, pos)

def note(s, path = None, pos = None):
    _emit('note', s, path, pos)

def print(s, path = None, pos = None):
    p = make_prefix(None, path, pos)
    sys.stderr.write('{}\n'.format(
        '{}: {}'.format(p, s)
        if p else
        '{}'.format(s)
    ))
