"""Service naming helpers."""


def server_name(env: str, name: str) -> str:
    return f"{env}.{name}"


def server_endpoint(env: str, name: str) -> str:
    return "discovery:///" + server_name(env, name)