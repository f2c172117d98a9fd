"""Example: per-service settings with shared defaults.

Every service category may override any option; anything it leaves out is
read from the ``default`` subtree.
"""

from cfgmap import ConfigMap, Int, IsInt, IsStr, Map, Str


def build_config() -> ConfigMap:
    """Build the tree a parser would normally hand over."""
    cmap = ConfigMap.with_default("default")
    cmap.add("default", Map())
    cmap.add("default/ip", Str("127.0.0.1"))
    cmap.add("default/port", Int(8080))

    cmap.add("http", Map())
    cmap.add("http/port", Int(80))

    cmap.add("admin", Map())
    cmap.add("admin/ip", Str("10.0.0.1"))
    return cmap


def listen_address(cmap: ConfigMap, service: str) -> str:
    """Resolve ``ip:port`` for a service, validating both options."""
    ip = cmap.get_option(service, "ip")
    port = cmap.get_option(service, "port")
    if not (IsStr(ip) and IsInt(port)):
        raise ValueError(f"Incomplete network settings for {service}")
    return f"{ip.as_str()}:{port.as_int()}"


if __name__ == "__main__":
    config = build_config()
    for name in ("http", "admin", "metrics"):
        print(f"{name}: {listen_address(config, name)}")
