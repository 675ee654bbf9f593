# Fixtures for WC001.


def compute():
    return 1


def assigned_once():
    x = compute()  # want "unused variable x"
    y = compute()
    return y


def annotated():
    label: str = "name"  # want "WC001 unused variable label"
    hint: int
    return hint


def underscored():
    _ignored = compute()
    total = 0
    total += compute()
    return total


def closure():
    counter = 0

    def inner():
        return counter

    return inner


def rebinding():
    first = compute()  # want "unused variable first"
    first = compute()


async def coroutine():
    pending = compute()  # want "unused variable pending"
    return None
