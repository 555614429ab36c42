default = '\033[0m'
context = '\033[33m'


def wrap(text, style):
    if style is None:
        return str(text)
    return "{}{}{}".format(style, text, default)
