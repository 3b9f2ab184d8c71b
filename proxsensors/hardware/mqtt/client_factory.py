"""
Helpers for constructing MQTT clients that work across paho-mqtt 1.x and 2.x.

The 2.x releases require a callback API version flag. The publisher only
uses the connect/publish calls, so the newest callback API is preferred
when available; 1.x installations without the enum are still supported.
"""
from __future__ import annotations

from typing import Any, Dict

import paho.mqtt.client as mqtt


def create_mqtt_client(
    client_id: str = "",
    username: str = "",
    password: str = "",
    **kwargs: Any,
) -> mqtt.Client:
    """
    Build an MQTT client that is forward-compatible with paho-mqtt 2.x and
    gracefully degrades when running with 1.x.

    Args:
        client_id: Optional client identifier.
        username: Broker username; credentials are only set when non-empty.
        password: Broker password (ignored without a username).
        kwargs: Extra keyword arguments forwarded to the client constructor.
    """
    client_kwargs: Dict[str, Any] = {"client_id": client_id or ""}

    # Keep MQTT v3.1.1 protocol by default for broker compatibility.
    client_kwargs["protocol"] = kwargs.pop("protocol", getattr(mqtt, "MQTTv311", 4))
    client_kwargs.update(kwargs)

    callback_api_version = getattr(mqtt, "CallbackAPIVersion", None)
    if callback_api_version is not None:
        callback_value = getattr(callback_api_version, "VERSION2", None) or getattr(
            callback_api_version, "VERSION1", None
        )
        if callback_value is not None:
            client_kwargs["callback_api_version"] = callback_value

    try:
        client = mqtt.Client(**client_kwargs)
    except TypeError:
        # Older paho versions do not support callback_api_version; retry with basics.
        client_kwargs.pop("callback_api_version", None)
        client = mqtt.Client(**client_kwargs)

    if username:
        client.username_pw_set(username, password or None)
    return client
