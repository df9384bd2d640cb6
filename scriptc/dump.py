import enum
import importlib.util
import marshal
import re
import struct
import types


class Dump_status(enum.Enum):
    OK = 0
    WRITE_FAULT = -2
    INVALID_ARGUMENT = -6


# Hash-based pyc, source hash not checked on import (PEP 552).
FLAG_HASH_BASED = 0b01

BYTES_PER_LINE = 16

C_IDENTIFIER = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
C_KEYWORDS = frozenset((
    'auto', 'break', 'case', 'char', 'const', 'continue', 'default', 'do',
    'double', 'else', 'enum', 'extern', 'float', 'for', 'goto', 'if',
    'inline', 'int', 'long', 'register', 'restrict', 'return', 'short',
    'signed', 'sizeof', 'static', 'struct', 'switch', 'typedef', 'union',
    'unsigned', 'void', 'volatile', 'while', '_Alignas', '_Alignof',
    '_Atomic', '_Bool', '_Complex', '_Generic', '_Imaginary', '_Noreturn',
    '_Static_assert', '_Thread_local',
))

C_PROLOGUE = '''#include <stdint.h>
const uint8_t
#if defined __GNUC__
__attribute__((aligned(4)))
#elif defined _MSC_VER
__declspec(align(4))
#endif
{symbol}[] = {{
'''
C_EPILOGUE = '};\n'


def is_c_identifier(s):
    return bool(s) and (C_IDENTIFIER.match(s) is not None) and (s not in C_KEYWORDS)

def strip_debug_info(code):
    consts = tuple(
        (strip_debug_info(each) if isinstance(each, types.CodeType) else each)
        for each
        in code.co_consts
    )
    return code.replace(co_filename = '', co_consts = consts)

def to_bytes(unit, debug_info):
    code = unit.code()
    if not debug_info:
        code = strip_debug_info(code)

    data = bytearray(importlib.util.MAGIC_NUMBER)
    data.extend(struct.pack('<I', FLAG_HASH_BASED))
    data.extend(importlib.util.source_hash(unit.source()))
    data.extend(marshal.dumps(code))
    return bytes(data)

def to_c_array(data, symbol):
    lines = [C_PROLOGUE.format(symbol = symbol)]
    for i in range(0, len(data), BYTES_PER_LINE):
        lines.append('{}\n'.format(''.join(
            '0x{:02x},'.format(each)
            for each
            in data[i:i + BYTES_PER_LINE]
        )))
    lines.append(C_EPILOGUE)
    return ''.join(lines)

def _write(stream, data):
    try:
        stream.write(data)
        stream.flush()
    except OSError:
        return Dump_status.WRITE_FAULT
    return Dump_status.OK

def dump_binary(unit, debug_info, stream):
    if stream is None:
        return Dump_status.INVALID_ARGUMENT
    return _write(stream, to_bytes(unit, debug_info))

def dump_c_array(unit, debug_info, stream, symbol):
    if stream is None or not is_c_identifier(symbol):
        return Dump_status.INVALID_ARGUMENT
    text = to_c_array(to_bytes(unit, debug_info), symbol)
    return _write(stream, text.encode('ascii'))
