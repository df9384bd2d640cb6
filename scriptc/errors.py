EXIT_SUCCESS = 0
EXIT_FAILURE = 1


################################################################################
# Base class for errors that end an invocation of the compiler front end.
#
class Error(Exception):
    status = EXIT_FAILURE
    show_usage = False
    silent = False

    def __init__(self):
        super().__init__()
        self._notes = []

    def what(self):
        return ' '.join(type(self).__name__.lower().split('_'))

    def notes(self):
        return self._notes

    def note(self, s):
        self._notes.append(s)
        return self

    def __str__(self):
        return self.what()


################################################################################
# Errors in the command line: missing, duplicated, or malformed switches.
#
class Usage_error(Error):
    show_usage = True

class Missing_input(Usage_error):
    def what(self):
        return 'no program file given'

class Duplicate_output(Usage_error):
    def __init__(self, outfile):
        super().__init__()
        self.outfile = outfile

    def what(self):
        return 'An output file is already specified. ({})'.format(self.outfile)

class Missing_symbol(Usage_error):
    def what(self):
        return 'Function name is not specified.'

class Unknown_option(Usage_error):
    def __init__(self, option):
        super().__init__()
        self.option = option

    def what(self):
        return 'unknown option: {}'.format(self.option)


################################################################################
# Errors opening the program file or the output file.
#
class Open_error(Error):
    show_usage = True
    KIND = 'file'

    def __init__(self, path, reason = None):
        super().__init__()
        self.path = path
        self.reason = reason

    def what(self):
        s = 'Cannot open {}. ({})'.format(self.KIND, self.path)
        if self.reason is not None:
            s = '{}: {}'.format(s, self.reason)
        return s

class Cannot_open_input(Open_error):
    KIND = 'program file'

class Cannot_open_output(Open_error):
    KIND = 'output file'


################################################################################
# Errors reported after the command line was accepted.
#
class Compile_error(Error):
    # The compiler service has already reported the problem.
    silent = True

    def __init__(self, filename):
        super().__init__()
        self.filename = filename

    def what(self):
        return 'compilation failed: {}'.format(self.filename)

class Invalid_symbol_error(Error):
    def __init__(self, symbol):
        super().__init__()
        self.symbol = symbol

    def what(self):
        return '{}: Invalid C language symbol name'.format(self.symbol)

class Dump_error(Error):
    def __init__(self, path, status):
        super().__init__()
        self.path = path
        self.status_of_dump = status

    def what(self):
        return 'cannot dump bytecode to {}: {}'.format(
            self.path,
            self.status_of_dump.name.lower().replace('_', ' '),
        )
