"""Canonical list of config variables defined by ble-advertising."""

from typedargs import type_system
from typedargs.exceptions import ArgumentError


def get_variables():
    prefix = "ble_advertising"

    conf_vars = []
    conf_vars.append(["platform", "string", "Platform whose advertisement format is decoded (android or ios)",
                      "android"])
    conf_vars.append(["strict", "bool", "Raise on malformed advertisements instead of returning a partial record",
                      "true"])

    return prefix, conf_vars


def get_default(name):
    """Get the typed default value of a config variable."""

    _prefix, conf_vars = get_variables()

    for var_name, var_type, _desc, default in conf_vars:
        if var_name == name:
            return type_system.convert_to_type(default, var_type)

    raise ArgumentError("Unknown config variable", name=name)
