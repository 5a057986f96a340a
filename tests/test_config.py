"""Tests for ContextVar-based configuration."""

from tailprog.config import (
    TailprogConfig,
    config_context,
    get_config,
    reset_config,
    set_config,
)


class TestTailprogConfig:
    def test_defaults(self) -> None:
        config = TailprogConfig()
        assert config.json_indent is None
        assert config.max_depth == 200
        assert config.log_level == "WARNING"

    def test_from_dict_ignores_unknown_keys(self) -> None:
        config = TailprogConfig.from_dict({"max_depth": 10, "colour": "red"})
        assert config.max_depth == 10
        assert not hasattr(config, "colour")

    def test_from_empty_dict(self) -> None:
        assert TailprogConfig.from_dict({}) == TailprogConfig()


class TestConfigContext:
    def test_default_is_active(self) -> None:
        assert get_config() == TailprogConfig()

    def test_context_manager_restores(self) -> None:
        with config_context(TailprogConfig(max_depth=5)) as cfg:
            assert get_config() is cfg
        assert get_config().max_depth == 200

    def test_nested_contexts(self) -> None:
        with config_context(TailprogConfig(max_depth=5)):
            with config_context(TailprogConfig(max_depth=7)):
                assert get_config().max_depth == 7
            assert get_config().max_depth == 5

    def test_set_and_reset_with_token(self) -> None:
        token = set_config(TailprogConfig(json_indent=4))
        try:
            assert get_config().json_indent == 4
        finally:
            reset_config(token)
        assert get_config().json_indent is None

    def test_reset_without_token_restores_defaults(self) -> None:
        set_config(TailprogConfig(json_indent=4))
        reset_config()
        assert get_config() == TailprogConfig()
