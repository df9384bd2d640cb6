import scriptc.util.log
from scriptc import env


def verbose(s):
    if env.verbose():
        scriptc.util.log.print(s)

def debug(s):
    if env.debugging():
        scriptc.util.log.debug(s)
