import time


def logger(msg: str):
    print("[" + time.strftime('%H:%M:%S') + "]", msg)


def warn(*msgs):
    print("[WARNING]", *msgs)


def intsep(integer: int, sep=" "):
    return f"{integer:,}".replace(",", sep)


class doPrint:

    def __init__(self, verbose=True):
        self.verbose = verbose

    def __call__(self, *args, **kwargs):
        if self.verbose:
            print(*args, **kwargs)
