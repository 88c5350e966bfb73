import os
import typing

import yaml

from dicecalc.pool import DiceError

SETTINGS_FILE = "dicecalc.yaml"
_default_settings_file = os.path.join(os.path.dirname(__file__), "settings.default.yaml")


def load_settings(path: typing.Optional[str] = None) -> typing.Dict[str, typing.Any]:
    with open(_default_settings_file) as f:
        settings: typing.Dict[str, typing.Any] = yaml.safe_load(f)

    if path is None:
        path = SETTINGS_FILE
    if os.path.exists(path):
        try:
            with open(path) as f:
                overrides = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise DiceError("Could not read settings from %s: %s" % (path, e))
        if not isinstance(overrides, dict):
            raise DiceError("Settings in %s must be a mapping" % path)
        settings.update(overrides)
    return settings
