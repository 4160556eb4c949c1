"""Actionable error catalog for xdenv."""

from typing import Dict

_ERROR_MESSAGES: Dict[str, Dict[str, str]] = {
    "missing_cluster_hosts": {
        "what": "No admin server host or container list has been set (missing admin host or container list).",
        "next": "Provide an `ec2servers.csv` artifact or set the `xd_admin_host` and `xd_containers` variables.",
    },
    "invalid_admin_host": {
        "what": "Admin server host is not a valid URL: {value}",
        "next": "Set `xd_admin_host` to an http(s) URL such as `http://localhost:9393`.",
    },
    "no_valid_containers": {
        "what": "None of the configured container hosts is a valid URL: {value}",
        "next": "Set `xd_containers` to a comma-separated list of http(s) URLs.",
    },
    "invalid_integer": {
        "what": "Property `{key}` must be an integer, got '{value}'.",
        "next": "Fix the value in the artifact, environment or config file.",
    },
    "negative_pause_time": {
        "what": "Property `xd_pause_time` must be a non-negative number of seconds, got '{value}'.",
        "next": "Set `xd_pause_time` to 0 or more.",
    },
    "property_file_not_found": {
        "what": "Property file not found: {path}",
        "next": "Create the YAML property file or omit `--config` to use the artifact and environment only.",
    },
    "invalid_property_file": {
        "what": "Property file '{path}' could not be parsed: {reason}",
        "next": "Write the file as a flat YAML mapping of property keys such as `xd_admin_host`.",
    },
    "unknown_property_keys": {
        "what": "Property file '{path}' names unknown properties: {keys}",
        "next": "Use only the `xd_*` and `jdbc_*` property keys.",
    },
    "private_key_file_unset": {
        "what": "No EC2 private key file has been set.",
        "next": "Set `xd_private_key_file`, or set `xd_run_on_ec2=false` for local clusters.",
    },
    "private_key_not_found": {
        "what": "The private key file {path} does not exist.",
        "next": "Check the `xd_private_key_file` path.",
    },
}


def actionable_error(code: str, **kwargs: str) -> str:
    """Render a catalog entry as "<what happened> Suggested action: <next step>"."""
    try:
        template = _ERROR_MESSAGES[code]
    except KeyError:
        raise KeyError(f"Unknown error catalog key: {code}") from None

    what, next_step = (template[part].format(**kwargs) for part in ("what", "next"))
    return f"{what} Suggested action: {next_step}"
