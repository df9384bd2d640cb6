import colored

from scriptc import env


def colorise(color, s):
    if (color is None) or not env.colour():
        return s
    return '{}{}{}'.format(
        colored.fg(color),
        s,
        colored.attr('reset'),
    )
