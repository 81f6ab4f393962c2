import re
from pathlib import Path
from typing import Any, Dict

import yaml

from lc3_core.common.errors import ConfigError
from lc3_core.common.types import WORD_MASK
from .models import SystemConfig, CpuInitialState, ConsoleConfig

_REGISTER_NAME = re.compile(r"^[rR]([0-7])$")


class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e
        config = self.parse(data or {})
        base = Path(path).parent
        config.images = [str(base / image) for image in config.images]
        return config

    def parse(self, data: Dict[str, Any]) -> SystemConfig:
        if not isinstance(data, dict):
            raise ConfigError("Config root must be a mapping.")

        images = data.get("images", [])
        if not isinstance(images, list):
            raise ConfigError("'images' must be a list of file paths.")

        # Parse Initial State
        initial_state_data = self._section(data, "initial_state")
        registers = {}
        for name, value in self._section(initial_state_data, "registers").items():
            match = _REGISTER_NAME.match(str(name))
            if not match:
                raise ConfigError(f"Unknown register name: {name}")
            registers[f"r{match.group(1)}"] = self.parse_word(value)
        initial_state = CpuInitialState(
            pc=self.parse_word(initial_state_data.get("pc", 0x3000)),
            registers=registers,
        )

        console_data = self._section(data, "console")
        console = ConsoleConfig(
            raw_mode=bool(console_data.get("raw_mode", True)),
            prompt=str(console_data.get("prompt", ConsoleConfig().prompt)),
        )

        log_level = str(self._section(data, "logging").get("level", "WARNING")).upper()

        return SystemConfig(
            images=[str(p) for p in images],
            initial_state=initial_state,
            console=console,
            log_level=log_level,
        )

    def _section(self, data: Dict[str, Any], key: str) -> Dict[str, Any]:
        section = data.get(key) or {}
        if not isinstance(section, dict):
            raise ConfigError(f"'{key}' must be a mapping.")
        return section

    def parse_word(self, value: Any) -> int:
        result = self._parse_int(value)
        if not 0 <= result <= WORD_MASK:
            raise ConfigError(f"Value out of 16-bit range: {value}")
        return result

    def _parse_int(self, value: Any) -> int:
        if isinstance(value, bool):
            raise ConfigError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                if value.lower().startswith("0x"):
                    return int(value, 16)
                if value.lower().startswith("x"):
                    # LC-3アセンブラ表記 (x3000)
                    return int(value[1:], 16)
                return int(value)
            except ValueError:
                pass
        raise ConfigError(f"Invalid integer format: {value}")
