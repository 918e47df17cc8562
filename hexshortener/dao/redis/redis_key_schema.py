import functools
from collections.abc import Callable


__all__ = ['RedisKeySchema']


def prefix_key(func: Callable) -> Callable:
    @functools.wraps(func)
    def wrapper(self, *args, **kwargs) -> str:
        key = func(self, *args, **kwargs)
        return f'{self.prefix}:{key}' if self.prefix is not None else key

    return wrapper


class RedisKeySchema:
    """Map shortcodes to Redis keys.

    The key is the bare shortcode unless a prefix is set, in which case it
    becomes "<prefix>:<shortcode>" (e.g. "hexshortener:prod:dca7568").
    """

    def __init__(self, prefix: str | None = None):
        if prefix is not None and not isinstance(prefix, str):
            raise TypeError(f'Prefix must be of type string (given type: {type(prefix)}).')

        self.prefix = prefix

    @prefix_key
    def link_key(self, shortcode: str) -> str:
        return shortcode
