import dis
import platform
import sys

import scriptc
import scriptc.util.log
from scriptc import dump, env


class Service_closed(Exception):
    pass


class Compilation_unit:
    def __init__(self, filename, source, code):
        self._filename = filename
        self._source = source   # bytes
        self._code = code       # types.CodeType

    def filename(self):
        return self._filename

    def source(self):
        return self._source

    def code(self):
        return self._code


class Compiler_service:
    def __init__(self, optimize = None):
        self._optimize = (optimize if optimize is not None else env.optimize())
        self._units = []
        self._closed = False

    def _check_open(self):
        if self._closed:
            raise Service_closed()

    def units(self):
        return tuple(self._units)

    def closed(self):
        return self._closed

    def close(self):
        self._units.clear()
        self._closed = True

    def show_version(self, stream = None):
        stream = (stream if stream is not None else sys.stdout)
        stream.write('{} {} ({}) [{} {}]\n'.format(
            scriptc.suite.lower(),
            scriptc.__version__,
            scriptc.__release_date__,
            platform.python_implementation(),
            platform.python_version(),
        ))

    def show_copyright(self, stream = None):
        stream = (stream if stream is not None else sys.stdout)
        stream.write('{} - {}\n'.format(
            scriptc.suite.lower(),
            scriptc.__copyright__,
        ))

    def compile(self, stream, filename, no_exec = True, dump_result = False):
        self._check_open()

        source = stream.read()
        try:
            code = compile(
                source,
                filename,
                'exec',
                dont_inherit = True,
                optimize = self._optimize,
            )
        except SyntaxError as e:
            pos = None
            if e.lineno is not None:
                pos = (e.lineno, (e.offset or 0))
            scriptc.util.log.error(e.msg, path = filename, pos = pos)
            return None
        except ValueError as e:
            # Null bytes, undecodable source.
            scriptc.util.log.error(str(e), path = filename)
            return None
        except (RecursionError, MemoryError) as e:
            # Deeply nested or very large, but otherwise valid, programs.
            scriptc.util.log.error('program too complex to compile: {}'.format(
                (str(e) or type(e).__name__),
            ), path = filename)
            return None

        unit = Compilation_unit(filename, source, code)
        self._units.append(unit)

        if dump_result:
            dis.dis(code, file = sys.stdout)
            sys.stdout.flush()
        if not no_exec:
            exec(code, {'__name__': '__main__', '__file__': filename})

        return unit

    def dump_binary(self, unit, debug_info, stream):
        self._check_open()
        return dump.dump_binary(unit, debug_info, stream)

    def dump_c_array(self, unit, debug_info, stream, symbol):
        self._check_open()
        return dump.dump_c_array(unit, debug_info, stream, symbol)
