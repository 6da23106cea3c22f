"""Test configuration and helper fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_ACL = """\
; 节点组
[custom]
;自动测速
custom_proxy_group=🚀 节点选择`select`[]🎯 全球直连`[]♻️ 自动选择`[]🇭🇰 香港节点`[]🇯🇵 日本节点`[]🇺🇸 美国节点
custom_proxy_group=♻️ 自动选择`url-test`.*`http://www.gstatic.com/generate_204`300,,50
custom_proxy_group=🇭🇰 香港节点`url-test`(港|HK|Hong Kong)`http://www.gstatic.com/generate_204`300,,50
custom_proxy_group=🇯🇵 日本节点`url-test`(日本|JP|Japan)`http://www.gstatic.com/generate_204`300,,50
custom_proxy_group=🇺🇸 美国节点`url-test`(美|US|USA)`http://www.gstatic.com/generate_204`300,,50
custom_proxy_group=🎯 全球直连`select`[]DIRECT

;规则集
ruleset=🎯 全球直连,https://raw.githubusercontent.com/ACL4SSR/ACL4SSR/master/Clash/LocalAreaNetwork.list
ruleset=🛑 广告拦截,https://raw.githubusercontent.com/ACL4SSR/ACL4SSR/master/Clash/BanAD.list
ruleset=🚀 节点选择,https://raw.githubusercontent.com/ACL4SSR/ACL4SSR/master/Clash/ProxyMedia.list
ruleset=🎯 全球直连,[]GEOIP,CN
ruleset=🚀 节点选择,[]MATCH
"""


@pytest.fixture
def sample_acl() -> str:
    """Return a representative ACL4SSR document."""
    return SAMPLE_ACL


@pytest.fixture
def acl_file(tmp_path: Path) -> Path:
    """Write the sample document to disk and return its path."""
    path = tmp_path / "ACL4SSR_Online.ini"
    path.write_text(SAMPLE_ACL, encoding="utf-8")
    return path
