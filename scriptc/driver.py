import os
import sys

import scriptc.service
import scriptc.util.log
from scriptc import dump, env, errors, frontend, logs


EXECUTABLE = 'scriptc'


def report_error(executable_name, e):
    if e.silent:
        logs.verbose(e.what())
        return
    scriptc.util.log.error(s = e.what(), path = executable_name)
    for each in e.notes():
        scriptc.util.log.note(s = each, path = executable_name)

def compile_and_dump(executable_name, args, service, handles):
    ############################################################################
    # Init -> Parsed
    config = frontend.parse_args(executable_name, args, service, handles)
    logs.debug('config: {}'.format(config))

    ############################################################################
    # Parsed -> Compiled
    filename = config.source.name()
    logs.verbose('compiling {}'.format(filename))
    unit = service.compile(
        handles.input,
        filename,
        no_exec = True,
        dump_result = config.verbose,
    )
    if unit is None:
        raise errors.Compile_error(filename)

    ############################################################################
    # Compiled -> SyntaxOkExit
    if config.check_syntax:
        print('Syntax OK')
        return errors.EXIT_SUCCESS

    ############################################################################
    # Compiled -> DumpedExit
    logs.verbose('writing {} to {}'.format(
        config.output_kind.value,
        config.sink.name(),
    ))
    if config.symbol_name is not None:
        status = service.dump_c_array(
            unit,
            config.debug_info,
            handles.output,
            config.symbol_name,
        )
        if status is dump.Dump_status.INVALID_ARGUMENT:
            raise errors.Invalid_symbol_error(config.symbol_name).note(
                'symbol must be a C identifier and not a C keyword')
    else:
        status = service.dump_binary(unit, config.debug_info, handles.output)

    if status is not dump.Dump_status.OK:
        raise errors.Dump_error(config.sink.name(), status)

    return errors.EXIT_SUCCESS

def run(executable_name, args, service = None):
    try:
        env.colour_mode()
        if service is None:
            service = scriptc.service.Compiler_service()
    except env.Environment_error as e:
        scriptc.util.log.error(s = e.what(), path = executable_name)
        return errors.EXIT_FAILURE

    handles = frontend.Handles()
    failures = []
    try:
        try:
            status = compile_and_dump(executable_name, args, service, handles)
        except errors.Error as e:
            report_error(executable_name, e)
            if e.show_usage:
                frontend.print_usage(executable_name)
            status = e.status
        finally:
            failures = handles.close()
    finally:
        service.close()

    for each in failures:
        if status == errors.EXIT_SUCCESS:
            scriptc.util.log.error(
                s = 'cannot close file: {}'.format(each.strerror or each),
                path = executable_name,
            )
        else:
            logs.verbose('cannot close file: {}'.format(each))
    if failures:
        status = errors.EXIT_FAILURE
    return status

def main(executable_name, args):
    return run(os.path.basename(executable_name) or EXECUTABLE, args)

def entry():
    sys.exit(main(sys.argv[0], sys.argv[1:]))
