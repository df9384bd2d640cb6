import pytest

from scriptc import dump


@pytest.fixture(autouse = True)
def plain_environment(monkeypatch):
    for each in (
            'SCRIPTC_BINARY_EXT',
            'SCRIPTC_C_EXT',
            'SCRIPTC_OPTIMIZE',
            'SCRIPTC_VERBOSE',
            'SCRIPTC_DEBUG',
    ):
        monkeypatch.delenv(each, raising = False)
    monkeypatch.setenv('SCRIPTC_COLOUR', 'never')


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def program(workdir):
    path = workdir / 'hello.py'
    path.write_text('def greet(who):\n    return "Hello, " + who\n\nprint(greet("World"))\n')
    return path


class Fake_service:
    def __init__(self, compile_ok = True, c_status = dump.Dump_status.OK,
            binary_status = dump.Dump_status.OK):
        self.compile_ok = compile_ok
        self.c_status = c_status
        self.binary_status = binary_status
        self.calls = []
        self.close_count = 0

    def show_version(self, stream = None):
        self.calls.append('show_version')
        print('fake 1.0')

    def show_copyright(self, stream = None):
        self.calls.append('show_copyright')
        print('fake - Copyright')

    def compile(self, stream, filename, no_exec = True, dump_result = False):
        self.calls.append(('compile', filename, no_exec, dump_result))
        return (object() if self.compile_ok else None)

    def dump_binary(self, unit, debug_info, stream):
        self.calls.append(('dump_binary', debug_info))
        return self.binary_status

    def dump_c_array(self, unit, debug_info, stream, symbol):
        self.calls.append(('dump_c_array', debug_info, symbol))
        return self.c_status

    def close(self):
        self.close_count += 1


@pytest.fixture
def fake_service():
    return Fake_service
