"""
Named host profiles

A profile in api_config.yaml describes one remote API (scheme, host, optional
port and headers). build_from_profile() turns it into a ready-to-chain
ApiBuilder.
"""

from .builder import ApiBuilder
from .config import Config, config
from .enums import HttpScheme
from .exceptions import ConfigurationError
from .http_client import HttpClient
from .logging_config import get_module_logger

logger = get_module_logger("profiles")


def list_profiles(config_obj: Config | None = None) -> list[str]:
    """Return the names of all configured profiles, sorted"""
    if config_obj is None:
        config_obj = config

    profiles = config_obj.get("api.profiles", {})
    if not isinstance(profiles, dict):
        return []
    return sorted(profiles)


def build_from_profile(
    name: str,
    http_client: HttpClient | None = None,
    config_obj: Config | None = None,
) -> ApiBuilder:
    """
    Create an ApiBuilder pre-configured from a named profile

    Args:
        name: Profile name under api.profiles (e.g., "jsonplaceholder")
        http_client: HTTP client for the builder (optional)
        config_obj: Config object (optional, uses global config if None)

    Returns:
        ApiBuilder with scheme, host, port and headers applied

    Raises:
        ConfigurationError: If the profile is unknown or incomplete
    """
    if config_obj is None:
        config_obj = config

    key = f"api.profiles.{name}"
    profile = config_obj.get(key)
    if not isinstance(profile, dict):
        available = ", ".join(list_profiles(config_obj)) or "none"
        raise ConfigurationError(f"unknown profile (available: {available})", config_key=key)

    scheme = profile.get("scheme")
    host = profile.get("host")
    if not scheme or not host:
        raise ConfigurationError("profile needs both 'scheme' and 'host'", config_key=key)

    try:
        scheme = HttpScheme(str(scheme).lower())
    except ValueError as e:
        raise ConfigurationError(f"unsupported scheme '{scheme}'", config_key=key) from e

    builder = ApiBuilder(http_client).with_scheme(scheme).with_host(host)

    # Port must follow the scheme, which resets it
    if profile.get("port"):
        try:
            port = int(profile["port"])
        except (TypeError, ValueError) as e:
            raise ConfigurationError(
                f"port must be a number, got '{profile['port']}'", config_key=key
            ) from e
        builder.with_port(port)

    builder.with_headers(config_obj.get("api.defaults.headers", {}))
    builder.with_headers(profile.get("headers", {}))

    logger.debug(f"Built profile '{name}': {builder.get_uri()}")
    return builder
