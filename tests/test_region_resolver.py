from unittest.mock import patch

import pytest

from rosa_ops.core.processors.region_resolver import resolve_region
from rosa_ops.utils.exceptions import ConfigurationError

SUPPORTED = ["us-east-1", "us-west-2", "eu-west-1"]


def test_flag_region_wins_over_default():
    assert resolve_region("eu-west-1", "us-east-1", SUPPORTED) == "eu-west-1"


def test_falls_back_to_provider_default():
    assert resolve_region("", "us-west-2", SUPPORTED) == "us-west-2"


def test_empty_region_is_an_error():
    with pytest.raises(ConfigurationError, match="Expected a valid AWS region"):
        resolve_region("", "", SUPPORTED)


def test_interactive_default_is_flag_region():
    with patch(
        "rosa_ops.core.processors.region_resolver.interactive.get_option",
        return_value="us-west-2",
    ) as get_option:
        region = resolve_region("eu-west-1", "us-east-1", SUPPORTED, interactive_enabled=True)

    assert region == "us-west-2"
    assert get_option.call_args.kwargs["default"] == "eu-west-1"
    assert get_option.call_args.kwargs["options"] == SUPPORTED


def test_interactive_default_is_provider_default_without_flag():
    with patch(
        "rosa_ops.core.processors.region_resolver.interactive.get_option",
        side_effect=lambda question, **kwargs: kwargs["default"],
    ):
        assert resolve_region("", "us-east-1", SUPPORTED, interactive_enabled=True) == "us-east-1"
