from __future__ import annotations


class ConfigurationError(ValueError):
    """Raised when a plane order cannot produce a valid deck."""


def is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n < 4:
        return True
    if n % 2 == 0:
        return False
    f = 3
    while f * f <= n:
        if n % f == 0:
            return False
        f += 2
    return True


def check_order(order: int, require_prime: bool = True) -> int:
    """Validates a plane order and returns it.

    Plain modular arithmetic only forms a field for prime moduli, so prime
    powers such as 4 or 8 are rejected along with composites unless
    require_prime is false.
    """
    if isinstance(order, bool) or not isinstance(order, int):
        raise ConfigurationError(f'Order must be an integer, got {order!r}')
    if order < 2:
        raise ConfigurationError(f'Order must be at least 2, got {order}')
    if require_prime and not is_prime(order):
        raise ConfigurationError(f'Order must be prime, got {order}')
    return order
