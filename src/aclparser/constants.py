import re

CONFIG_FILE_NAME = "aclparser.yaml"

# Directive prefixes recognised by the line scanner
RULESET_PREFIX = "ruleset="
PROXY_GROUP_PREFIX = "custom_proxy_group="
COMMENT_PREFIXES = (";", "#")

# Ruleset spec prefixes
CLASH_CLASSIC_PREFIX = "clash-classic:"
CLASH_DOMAIN_PREFIX = "clash-domain:"
CLASH_IPCIDR_PREFIX = "clash-ipcidr:"
INLINE_RULE_PREFIX = "[]"
ACL4SSR_RELATIVE_PREFIX = "rules/ACL4SSR/"
ACL4SSR_CDN_BASE = "https://testingcf.jsdelivr.net/gh/ACL4SSR/ACL4SSR@master/"

DEFAULT_RULESET_INTERVAL = 86400

# Proxy group fields
PROXY_GROUP_SEPARATOR = "`"
EXPLICIT_PROXY_PREFIX = "[]"
WILDCARD_PROXY = ".*"
HEALTH_CHECK_SCHEMES = ("http://", "https://")

# Numeric parsing shared across decoders (ASCII digits only)
STRICT_INT_RE = re.compile(r"[+-]?[0-9]+")
LEADING_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
LEADING_DIGITS_RE = re.compile(r"^[0-9]+")

# Values outside this range are treated as unreadable
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1
