from dataclasses import dataclass
from datetime import timedelta

import pytest

from zkit.options import apply_options


@dataclass
class Config:
    name: str = "default"
    timeout: timedelta = timedelta(seconds=30)
    count: int = 1


def new_config(*opts):
    return apply_options(Config(), *opts)


def with_name(name):
    def option(cfg):
        cfg.name = name

    return option


def with_timeout(timeout):
    def option(cfg):
        cfg.timeout = timeout

    return option


def with_count(count):
    def option(cfg):
        cfg.count = count

    return option


@pytest.mark.parametrize(
    "opts, expected",
    [
        ((), Config("default", timedelta(seconds=30), 1)),
        ((with_name("test"),), Config("test", timedelta(seconds=30), 1)),
        (
            (with_name("production"), with_timeout(timedelta(seconds=60)), with_count(5)),
            Config("production", timedelta(seconds=60), 5),
        ),
        ((with_name("first"), with_name("second")), Config("second", timedelta(seconds=30), 1)),
    ],
    ids=["defaults only", "single option", "multiple options", "override same option"],
)
def test_options_pattern(opts, expected):
    cfg = new_config(*opts)
    assert cfg.name == expected.name
    assert cfg.timeout == expected.timeout
    assert cfg.count == expected.count


def test_options_chaining():
    cfg = new_config(
        with_name("chained"),
        with_timeout(timedelta(minutes=2)),
        with_count(10),
    )
    assert cfg == Config("chained", timedelta(minutes=2), 10)


def test_apply_options_returns_same_target():
    target = Config()
    result = apply_options(target, with_count(7))
    assert result is target
    assert target.count == 7