import os

import pytest

from scriptc import errors, frontend


@pytest.mark.parametrize('infile, ext, expected', (
    ('hello.py', '.pyc', 'hello.pyc'),
    ('hello', '.pyc', 'hello.pyc'),
    ('hello.', '.pyc', 'hello.pyc'),
    ('archive.tar.py', '.c', 'archive.tar.c'),
    ('dir.d/hello', '.c', 'dir.c'),
    ('hello.py', '', 'hello.py'),
    ('', '.pyc', '.pyc'),
))
def test_outfile_name(infile, ext, expected):
    assert frontend.outfile_name(infile, ext) == expected


def parse(args, service):
    handles = frontend.Handles()
    try:
        return frontend.parse_args('scriptc', args, service, handles), handles
    finally:
        handles.close()


def test_defaults_derive_binary_output(program, fake_service):
    config, handles = parse(['hello.py'], fake_service())
    assert config.source == frontend.Named_file('hello.py')
    assert config.sink == frontend.Named_file('hello.pyc')
    assert config.output_kind is frontend.Output_kind.RAW_BINARY
    assert config.symbol_name is None
    assert not config.check_syntax
    assert not config.debug_info
    assert not config.verbose
    assert (program.parent / 'hello.pyc').exists()
    assert handles.closed()


def test_symbol_selects_c_output(program, fake_service):
    config, _ = parse(['-Bhello_mrb', '-g', 'hello.py'], fake_service())
    assert config.output_kind is frontend.Output_kind.C_SOURCE_ARRAY
    assert config.symbol_name == 'hello_mrb'
    assert config.debug_info
    assert config.sink == frontend.Named_file('hello.c')


def test_extensions_come_from_environment(program, fake_service, monkeypatch):
    monkeypatch.setenv('SCRIPTC_BINARY_EXT', '.bc')
    config, _ = parse(['hello.py'], fake_service())
    assert config.sink == frontend.Named_file('hello.bc')


def test_explicit_output_is_not_extended(program, fake_service):
    config, _ = parse(['-oout', '-Bsym', 'hello.py'], fake_service())
    assert config.sink == frontend.Named_file('out')
    assert (program.parent / 'out').exists()
    assert not (program.parent / 'hello.c').exists()


def test_dash_output_is_standard_stream(program, fake_service):
    config, handles = parse(['-o-', 'hello.py'], fake_service())
    assert config.sink == frontend.Standard_stream()
    assert not (program.parent / '-').exists()


def test_standard_input_stops_scanning(workdir, fake_service):
    config, _ = parse(['-', '--no-such-option', 'ignored.py'], fake_service())
    assert config.source == frontend.Standard_stream()
    assert config.sink == frontend.Standard_stream()


def test_later_bare_tokens_are_ignored(program, fake_service):
    config, _ = parse(['hello.py', 'missing.py'], fake_service())
    assert config.source == frontend.Named_file('hello.py')


def test_unknown_single_dash_switch_is_ignored(program, fake_service):
    config, _ = parse(['-x', 'hello.py'], fake_service())
    assert config.source == frontend.Named_file('hello.py')


def test_syntax_check_opens_no_output(program, fake_service):
    config, _ = parse(['-c', '-Bsym', '-oexplicit', 'hello.py'], fake_service())
    assert config.check_syntax
    assert config.sink is None
    assert not (program.parent / 'explicit').exists()
    assert not (program.parent / 'hello.c').exists()


def test_missing_input(workdir, fake_service):
    with pytest.raises(errors.Missing_input):
        parse(['-c', '-g'], fake_service())


def test_empty_symbol(program, fake_service):
    with pytest.raises(errors.Missing_symbol):
        parse(['-B', 'hello.py'], fake_service())


def test_duplicate_output_opens_nothing(program, fake_service):
    with pytest.raises(errors.Duplicate_output) as e:
        parse(['-oa.out', '-ob.out', 'hello.py'], fake_service())
    assert e.value.outfile == 'a.out'
    assert not (program.parent / 'a.out').exists()
    assert not (program.parent / 'b.out').exists()


def test_unknown_long_option(program, fake_service):
    with pytest.raises(errors.Unknown_option) as e:
        parse(['--frobnicate', 'hello.py'], fake_service())
    assert e.value.option == '--frobnicate'


def test_missing_program_file(workdir, fake_service):
    with pytest.raises(errors.Cannot_open_input) as e:
        parse(['nope.py'], fake_service())
    assert 'nope.py' in e.value.what()


def test_unwritable_output(program, fake_service):
    with pytest.raises(errors.Cannot_open_output) as e:
        parse(['-ono/such/dir/out.pyc', 'hello.py'], fake_service())
    assert 'no/such/dir/out.pyc' in e.value.what()


def test_input_is_closed_after_output_failure(program, fake_service):
    handles = frontend.Handles()
    with pytest.raises(errors.Cannot_open_output):
        frontend.parse_args(
            'scriptc', ['-ono/such/dir/out', 'hello.py'], fake_service(), handles)
    assert not handles.input.closed
    handles.close()
    assert handles.input.closed


def test_version_exits_without_opening_files(program, fake_service, capsys):
    service = fake_service()
    with pytest.raises(SystemExit) as e:
        parse(['--version', 'hello.py'], service)
    assert e.value.code == 0
    assert service.calls == ['show_version']
    assert not (program.parent / 'hello.pyc').exists()
    assert 'fake 1.0' in capsys.readouterr().out


def test_copyright_exits(workdir, fake_service, capsys):
    with pytest.raises(SystemExit) as e:
        parse(['--copyright'], fake_service())
    assert e.value.code == 0
    assert 'Copyright' in capsys.readouterr().out


def test_v_prints_version_once(program, fake_service):
    service = fake_service()
    config, _ = parse(['-v', '-v', '-c', 'hello.py'], service)
    assert config.verbose
    assert service.calls == ['show_version']


def test_verbose_is_silent(program, fake_service):
    service = fake_service()
    config, _ = parse(['--verbose', '-v', '-c', 'hello.py'], service)
    assert config.verbose
    assert service.calls == []


def test_usage(capsys):
    frontend.print_usage('scriptc')
    out = capsys.readouterr().out
    assert out.startswith('Usage: scriptc [switches] programfile\n')
    assert '-B<symbol>' in out
    assert '--copyright' in out


@pytest.mark.skipif(not os.path.exists('/dev/full'), reason = 'requires /dev/full')
def test_close_releases_every_handle_after_write_fault(program):
    handles = frontend.Handles()
    handles.open_input(frontend.Named_file('hello.py'))
    handles.open_output(frontend.Named_file('/dev/full'))
    handles.output.write(b'bytecode')

    failures = handles.close()
    assert failures
    assert all(isinstance(each, OSError) for each in failures)
    assert handles.input.closed
    assert handles.output.closed
    assert handles.close() == []
