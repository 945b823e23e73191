from pyevspace import Vector


def vectorIsClose(lhs: Vector, rhs: Vector, places: int = 9) -> bool:
    epsilon = pow(10, -places)
    for left, right in zip(lhs, rhs):
        if abs(left - right) > epsilon:
            return False

    return True
