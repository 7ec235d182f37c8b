import numpy

EPSILON = 1e-5


def to_f32(value) -> numpy.float32:
    # Out-of-range values round to +/-inf like any other f32 conversion.
    with ieee_arithmetic():
        return numpy.float32(value)


def ieee_arithmetic():
    '''
    Context in which numpy reports nothing for division by zero, overflow or
    invalid operations. Results are the plain IEEE-754 inf / NaN values.
    '''
    return numpy.errstate(all="ignore")


def approx_equal(a, b, epsilon=EPSILON) -> bool:
    # Exact match first so equal infinities compare as equal.
    if a == b:
        return True
    with ieee_arithmetic():
        return bool(abs(a - b) <= epsilon)
