import collections
import enum
import sys

from scriptc import env, errors


STREAM_NAME = '-'

USAGE = (
    'switches:',
    '-c           check syntax only',
    '-o<outfile>  place the output into <outfile>',
    '-v           print version number, then turn on verbose mode',
    '-g           produce debugging information',
    '-B<symbol>   binary <symbol> output in C language format',
    '--verbose    run at verbose mode',
    '--version    print the version',
    '--copyright  print the copyright',
)


def print_usage(executable_name, stream = None):
    stream = (stream if stream is not None else sys.stdout)
    stream.write('Usage: {} [switches] programfile\n'.format(executable_name))
    for each in USAGE:
        stream.write('  {}\n'.format(each))


class Output_kind(enum.Enum):
    RAW_BINARY = 'binary'
    C_SOURCE_ARRAY = 'c'


################################################################################
# Where the program is read from, or where the bytecode is written to.
#
class Named_file:
    def __init__(self, path):
        self.path = path

    def name(self):
        return self.path

    def __eq__(self, other):
        return isinstance(other, Named_file) and (self.path == other.path)

    def __hash__(self):
        return hash(self.path)

    def __repr__(self):
        return 'Named_file({})'.format(repr(self.path))

class Standard_stream:
    def name(self):
        return STREAM_NAME

    def __eq__(self, other):
        return isinstance(other, Standard_stream)

    def __hash__(self):
        return hash(STREAM_NAME)

    def __repr__(self):
        return 'Standard_stream()'

def stream_of(path):
    return (Standard_stream() if path == STREAM_NAME else Named_file(path))


Run_config = collections.namedtuple('Run_config', (
    'source',
    'sink',
    'output_kind',
    'symbol_name',
    'check_syntax',
    'debug_info',
    'verbose',
))


class Handles:
    def __init__(self):
        self.input = None
        self.output = None
        self._owned = []
        self._closed = False

    def open_input(self, source):
        if isinstance(source, Standard_stream):
            self.input = sys.stdin.buffer
        else:
            self.input = self._own(open(source.path, 'rb'))
        return self.input

    def open_output(self, sink):
        if isinstance(sink, Standard_stream):
            self.output = sys.stdout.buffer
        else:
            self.output = self._own(open(sink.path, 'wb'))
        return self.output

    def _own(self, f):
        self._owned.append(f)
        return f

    def closed(self):
        return self._closed

    def close(self):
        failures = []
        if self._closed:
            return failures
        self._closed = True
        # Standard streams are only flushed, they belong to the process.
        if self.output is not None and not self.output.closed:
            try:
                self.output.flush()
            except OSError as e:
                failures.append(e)
        for each in self._owned:
            try:
                each.close()
            except OSError as e:
                failures.append(e)
        self._owned.clear()
        return failures


def outfile_name(infile, ext):
    outfile = infile
    if ext:
        p = outfile.rfind('.')
        if p == -1:
            p = len(outfile)
        outfile = outfile[:p] + ext
    return outfile


class Argument_cursor:
    def __init__(self, args):
        self._args = tuple(args)
        self._i = 0

    def __iter__(self):
        return self

    def __next__(self):
        if self._i >= len(self._args):
            raise StopIteration()
        each = self._args[self._i]
        self._i += 1
        return each


def parse_args(executable_name, args, service, handles):
    source = None
    outfile = None
    output_kind = Output_kind.RAW_BINARY
    symbol_name = None
    check_syntax = False
    debug_info = False
    verbose = False

    for each in Argument_cursor(args):
        if each == STREAM_NAME:
            source = Standard_stream()
            handles.open_input(source)
            break

        if each.startswith('--'):
            option = each[2:]
            if option == 'version':
                service.show_version()
                sys.exit(errors.EXIT_SUCCESS)
            elif option == 'verbose':
                verbose = True
            elif option == 'copyright':
                service.show_copyright()
                sys.exit(errors.EXIT_SUCCESS)
            else:
                raise errors.Unknown_option(each)
        elif each.startswith('-'):
            switch, value = each[1], each[2:]
            if switch == 'o':
                if outfile is not None:
                    raise errors.Duplicate_output(outfile)
                outfile = outfile_name(value, '')
            elif switch == 'B':
                output_kind = Output_kind.C_SOURCE_ARRAY
                symbol_name = value
                if not symbol_name:
                    raise errors.Missing_symbol()
            elif switch == 'c':
                check_syntax = True
            elif switch == 'v':
                if not verbose:
                    service.show_version()
                verbose = True
            elif switch == 'g':
                debug_info = True
        elif source is None:
            source = Named_file(each)
            try:
                handles.open_input(source)
            except OSError as e:
                raise errors.Cannot_open_input(each, e.strerror)

    if source is None:
        raise errors.Missing_input()

    sink = None
    if not check_syntax:
        if outfile is None:
            if isinstance(source, Standard_stream):
                outfile = STREAM_NAME
            else:
                ext = (
                    env.c_ext()
                    if output_kind is Output_kind.C_SOURCE_ARRAY else
                    env.binary_ext()
                )
                outfile = outfile_name(source.path, ext)
        sink = stream_of(outfile)
        try:
            handles.open_output(sink)
        except OSError as e:
            raise errors.Cannot_open_output(outfile, e.strerror)

    return Run_config(
        source = source,
        sink = sink,
        output_kind = output_kind,
        symbol_name = symbol_name,
        check_syntax = check_syntax,
        debug_info = debug_info,
        verbose = verbose,
    )
