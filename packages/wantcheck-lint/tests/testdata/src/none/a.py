def check(value):
    if value == None:  # want "WC003 comparison to None should use 'is'$"
        return True
    if None != value:  # want "should use 'is not'"
        return False
    return value is None
