import os
import typing

import yaml

from .errors import ConfigError

DEFAULT_CONFIG_FILE = os.path.join(os.path.dirname(__file__), "limits.default.yaml")


def _check_limit(key: str, value: typing.Any) -> None:
    # bool is an int subclass, but "max_item_count: yes" is a typo
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError("limit %s must be an integer, got %r" % (key, value))
    if value < 0:
        raise ConfigError("limit %s must not be negative, got %s" % (key, value))


class _Limits(typing.NamedTuple):
    max_item_count: int = 20
    max_dice_sides: int = 1000
    max_roll_times: int = 100
    max_number_magnitude: int = 65536


class Config(_Limits):
    """Limits applied while compiling a gurgle expression.

    max_item_count - how many number/dice items one expression may contain
    max_dice_sides - how many sides a single dice may have
    max_roll_times - total roll times of all dice in one expression
    max_number_magnitude - largest absolute value of a number item or target

    Every limit must be a non-negative int, otherwise ConfigError is raised.
    """

    __slots__ = ()

    def __new__(cls, *args, **kwargs) -> "Config":
        self = super().__new__(cls, *args, **kwargs)
        for key, value in zip(self._fields, self):
            _check_limit(key, value)
        return self

    def _replace(self, **kwargs) -> "Config":
        # the inherited _replace builds the tuple without going through __new__
        return type(self)(**{**self._asdict(), **kwargs})

    def with_max_item_count(self, value: int) -> "Config":
        return self._replace(max_item_count=value)

    def with_max_dice_sides(self, value: int) -> "Config":
        return self._replace(max_dice_sides=value)

    def with_max_roll_times(self, value: int) -> "Config":
        return self._replace(max_roll_times=value)

    def with_max_number_magnitude(self, value: int) -> "Config":
        return self._replace(max_number_magnitude=value)


DEFAULT_CONFIG = Config()


def config_from_dict(raw: typing.Optional[typing.Dict[str, typing.Any]]) -> Config:
    if raw is None:
        return DEFAULT_CONFIG
    if not isinstance(raw, dict):
        raise ConfigError("limits must be a mapping, got %s" % type(raw).__name__)

    unknown = set(raw) - set(Config._fields)
    if unknown:
        raise ConfigError("unknown limit(s): %s" % ", ".join(sorted(unknown)))

    return Config(**raw)


def load_config(path: str = DEFAULT_CONFIG_FILE) -> Config:
    try:
        with open(path) as file:
            raw = yaml.safe_load(file)
    except OSError as e:
        raise ConfigError("cannot read limits file %s: %s" % (path, e))
    except yaml.YAMLError as e:
        raise ConfigError("limits file %s is not valid YAML:\n%s" % (path, e))
    return config_from_dict(raw)
