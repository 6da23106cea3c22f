import json

import pytest
import yaml

from aclparser import parse_acl_config
from aclparser.exceptions import OutputError
from aclparser.output import render, to_serializable, write_output

CONTENT = (
    "custom_proxy_group=♻️ 自动选择`url-test`.*`http://www.gstatic.com/generate_204`300,,50\n"
    "ruleset=🎯 全球直连,[]GEOIP,CN\n"
)


def test_to_serializable():
    """Test conversion of a parse result to plain data."""
    data = to_serializable(parse_acl_config(CONTENT))
    assert data == {
        "rulesets": [
            {"group": "🎯 全球直连", "rule_url": "[]GEOIP,CN", "behavior": "classical", "interval": 86400}
        ],
        "proxy_groups": [
            {
                "name": "♻️ 自动选择",
                "type": "url-test",
                "proxies": [],
                "has_wildcard": True,
                "url": "http://www.gstatic.com/generate_204",
                "interval": 300,
                "tolerance": 50,
            }
        ],
    }


def test_render_json_keeps_unicode():
    """Test that JSON output is valid and not ASCII-escaped."""
    text = render(parse_acl_config(CONTENT), "json")
    assert "自动选择" in text
    assert json.loads(text)["proxy_groups"][0]["tolerance"] == 50


def test_render_yaml():
    """Test that YAML output round-trips to the same data."""
    config = parse_acl_config(CONTENT)
    text = render(config, "yaml")
    assert "全球直连" in text
    assert yaml.safe_load(text) == to_serializable(config)


def test_render_unknown_format():
    """Test that unsupported formats raise OutputError."""
    with pytest.raises(OutputError):
        render(parse_acl_config(CONTENT), "toml")


def test_write_output_creates_directories(tmp_path):
    """Test that write_output creates missing parent directories."""
    target = tmp_path / "nested" / "result.json"
    assert write_output("{}\n", target) == target
    assert target.read_text(encoding="utf-8") == "{}\n"
