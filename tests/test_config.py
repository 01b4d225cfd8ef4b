"""Tests for invocation config parsing (filterargs._config)."""

import pytest

from filterargs import (
    MAX_ARGUMENTS,
    MAX_CHAIN_LENGTH,
    ConfigParseError,
    InvocationConfig,
    TooManyArgumentsError,
    parse_chain_config,
    parse_invocation_config,
)


class TestParseInvocationConfig:
    def test_name_and_args(self) -> None:
        config = parse_invocation_config(
            {"name": "localRatelimit", "args": [240, "6s", "ip"]}
        )
        assert config == InvocationConfig("localRatelimit", (240, "6s", "ip"))

    def test_args_default_to_empty(self) -> None:
        config = parse_invocation_config({"name": "preserveHost"})
        assert config.args == ()

    def test_null_args(self) -> None:
        config = parse_invocation_config({"name": "preserveHost", "args": None})
        assert config.args == ()

    def test_arg_values_are_not_checked(self) -> None:
        config = parse_invocation_config({"name": "status", "args": [{"x": 1}]})
        assert config.args == ({"x": 1},)

    def test_not_a_dict(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a dict"):
            parse_invocation_config(["status"])  # type: ignore[arg-type]

    def test_missing_name(self) -> None:
        with pytest.raises(ConfigParseError, match="missing required field 'name'"):
            parse_invocation_config({"args": [1]})

    @pytest.mark.parametrize("name", ["", 42, ["status"]])
    def test_bad_name(self, name: object) -> None:
        with pytest.raises(ConfigParseError, match="non-empty string"):
            parse_invocation_config({"name": name})

    def test_args_not_a_list(self) -> None:
        with pytest.raises(ConfigParseError, match="must be a list"):
            parse_invocation_config({"name": "status", "args": "404"})

    def test_args_at_limit(self) -> None:
        config = parse_invocation_config(
            {"name": "static", "args": ["x"] * MAX_ARGUMENTS}
        )
        assert len(config.args) == MAX_ARGUMENTS

    def test_too_many_args(self) -> None:
        with pytest.raises(TooManyArgumentsError) as exc_info:
            parse_invocation_config(
                {"name": "static", "args": ["x"] * (MAX_ARGUMENTS + 1)}
            )
        assert exc_info.value.name == "static"
        assert exc_info.value.count == MAX_ARGUMENTS + 1
        assert exc_info.value.max == MAX_ARGUMENTS

    def test_too_many_args_is_a_parse_error(self) -> None:
        assert issubclass(TooManyArgumentsError, ConfigParseError)


class TestParseChainConfig:
    def test_order_is_kept(self) -> None:
        chain = parse_chain_config(
            [
                {"name": "preserveHost", "args": ["true"]},
                {"name": "status", "args": [404]},
            ]
        )
        assert [c.name for c in chain] == ["preserveHost", "status"]

    def test_empty_chain(self) -> None:
        assert parse_chain_config([]) == ()

    def test_not_a_list(self) -> None:
        with pytest.raises(ConfigParseError, match="chain must be a list"):
            parse_chain_config({"name": "status"})  # type: ignore[arg-type]

    def test_bad_item(self) -> None:
        with pytest.raises(ConfigParseError):
            parse_chain_config([{"name": "status"}, {"args": []}])

    def test_too_long(self) -> None:
        data = [{"name": "status"}] * (MAX_CHAIN_LENGTH + 1)
        with pytest.raises(ConfigParseError, match="exceeds maximum"):
            parse_chain_config(data)
