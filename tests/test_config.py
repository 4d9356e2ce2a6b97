import pytest

from ninarow.config import GameConfig, Mark, resolve_config, symbol_for
from ninarow.errors import InvalidConfiguration


def test_line_length_longer_than_size_rejected():
    with pytest.raises(InvalidConfiguration):
        GameConfig(size=3, line_length=4)


@pytest.mark.parametrize(
    "size,line_length",
    [(2, 2), (101, 3), (0, 3), (-5, 3), (10, 2), (10, 11), (3, 0)],
)
def test_out_of_range_rejected(size, line_length):
    with pytest.raises(InvalidConfiguration):
        GameConfig(size=size, line_length=line_length)


@pytest.mark.parametrize("size,line_length", [(3, 3), (100, 100), (100, 3), (15, 5)])
def test_valid_configs(size, line_length):
    cfg = GameConfig(size=size, line_length=line_length)
    assert cfg.cell_count == size * size
    assert cfg.marks == (Mark.X, Mark.O)


def test_non_integer_values_rejected():
    with pytest.raises(InvalidConfiguration):
        GameConfig(size="3", line_length=3)
    with pytest.raises(InvalidConfiguration):
        GameConfig(size=3.0, line_length=3)


def test_marks_must_differ():
    with pytest.raises(InvalidConfiguration):
        GameConfig(first_mark=Mark.O, second_mark=Mark.O)


def test_config_is_immutable():
    cfg = GameConfig()
    with pytest.raises(Exception):
        cfg.size = 5  # type: ignore[misc]


def test_invalid_configuration_is_a_value_error():
    with pytest.raises(ValueError):
        GameConfig(size=3, line_length=4)


def test_mark_symbols():
    assert Mark.X.symbol == 'x'
    assert Mark.O.symbol == 'o'
    assert Mark.X.other is Mark.O
    assert symbol_for(0) == '.'
    assert symbol_for(2) == 'o'


def test_resolve_config_env_then_args(monkeypatch):
    monkeypatch.delenv("NINAROW_SIZE", raising=False)
    monkeypatch.delenv("NINAROW_LINE_LENGTH", raising=False)
    assert resolve_config() == GameConfig(3, 3)

    monkeypatch.setenv("NINAROW_SIZE", "7")
    monkeypatch.setenv("NINAROW_LINE_LENGTH", "5")
    assert resolve_config() == GameConfig(7, 5)
    # explicit arguments win over the environment
    assert resolve_config(size=9) == GameConfig(9, 5)
    assert resolve_config(size=4, line_length=4) == GameConfig(4, 4)


def test_resolve_config_bad_env(monkeypatch):
    monkeypatch.setenv("NINAROW_SIZE", "big")
    with pytest.raises(InvalidConfiguration):
        resolve_config()
    monkeypatch.setenv("NINAROW_SIZE", "200")
    with pytest.raises(InvalidConfiguration):
        resolve_config()


def test_numpy_integers_accepted_like_grid():
    np = pytest.importorskip("numpy")
    cfg = GameConfig(size=np.int64(5), line_length=np.int32(4))
    assert cfg == GameConfig(5, 4)
    assert type(cfg.size) is int and type(cfg.line_length) is int
    with pytest.raises(InvalidConfiguration):
        GameConfig(size=True, line_length=3)
