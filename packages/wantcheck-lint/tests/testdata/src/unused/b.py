COUNT = 0


def uses_global():
    global COUNT
    COUNT = 1


def outer():
    value = 0

    def inner():
        nonlocal value
        value = 1

    inner()
    return value
