import pytest

from gurgle.config import (
    DEFAULT_CONFIG,
    DEFAULT_CONFIG_FILE,
    Config,
    config_from_dict,
    load_config,
)
from gurgle.errors import ConfigError


def test_defaults():
    assert DEFAULT_CONFIG == Config(20, 1000, 100, 65536)
    assert DEFAULT_CONFIG.max_item_count == 20
    assert DEFAULT_CONFIG.max_dice_sides == 1000
    assert DEFAULT_CONFIG.max_roll_times == 100
    assert DEFAULT_CONFIG.max_number_magnitude == 65536


def test_with_helpers_do_not_mutate():
    config = (
        DEFAULT_CONFIG.with_max_item_count(1)
        .with_max_dice_sides(2)
        .with_max_roll_times(3)
        .with_max_number_magnitude(4)
    )
    assert config == Config(1, 2, 3, 4)
    assert DEFAULT_CONFIG == Config()


def test_override_one_field():
    assert Config(max_roll_times=5) == DEFAULT_CONFIG._replace(max_roll_times=5)


def test_load_default_file():
    assert load_config(DEFAULT_CONFIG_FILE) == DEFAULT_CONFIG
    assert load_config() == DEFAULT_CONFIG


def test_load_partial_file(tmp_path):
    path = tmp_path / "limits.yaml"
    path.write_text("max_dice_sides: 100\nmax_roll_times: 5\n")
    assert load_config(str(path)) == Config(max_dice_sides=100, max_roll_times=5)


def test_load_empty_file(tmp_path):
    path = tmp_path / "limits.yaml"
    path.write_text("")
    assert load_config(str(path)) == DEFAULT_CONFIG


@pytest.mark.parametrize(
    "content",
    [
        "max_items: 3\n",
        "max_item_count: -1\n",
        "max_item_count: three\n",
        "max_item_count: yes\n",
        "max_item_count: 1.5\n",
        "- 1\n- 2\n",
        "max_item_count: [1\n",
    ],
)
def test_load_bad_file(tmp_path, content):
    path = tmp_path / "limits.yaml"
    path.write_text(content)
    with pytest.raises(ConfigError):
        load_config(str(path))


def test_load_missing_file(tmp_path):
    with pytest.raises(ConfigError, match="cannot read limits file"):
        load_config(str(tmp_path / "missing.yaml"))


def test_config_from_dict():
    assert config_from_dict(None) == DEFAULT_CONFIG
    assert config_from_dict({"max_item_count": 0}).max_item_count == 0


@pytest.mark.parametrize(
    "overrides",
    [
        {"max_item_count": -1},
        {"max_dice_sides": "10"},
        {"max_roll_times": 2.5},
        {"max_number_magnitude": True},
    ],
)
def test_config_rejects_bad_limits(overrides):
    with pytest.raises(ConfigError):
        Config(**overrides)


def test_config_rejects_bad_positional_limit():
    with pytest.raises(ConfigError, match="max_dice_sides"):
        Config(20, -1000)


def test_with_helpers_validate():
    with pytest.raises(ConfigError, match="must not be negative"):
        DEFAULT_CONFIG.with_max_roll_times(-1)
    with pytest.raises(ConfigError, match="must be an integer"):
        DEFAULT_CONFIG._replace(max_item_count=None)


def test_with_helpers_keep_type():
    assert isinstance(DEFAULT_CONFIG.with_max_item_count(0), Config)
