# tests/config/test_config.py
"""
lc3_core.configパッケージ（ConfigLoader, SystemBuilder）の単体テスト。
"""
import pytest

from lc3_core.common.errors import ConfigError
from lc3_core.config.builder import SystemBuilder
from lc3_core.config.loader import ConfigLoader
from lc3_core.config.models import SystemConfig, CpuInitialState
from lc3_core.transport.console import ScriptedConsole


class TestConfigLoader:
    def test_defaults(self):
        config = ConfigLoader().parse({})
        assert config.images == []
        assert config.initial_state.pc == 0x3000
        assert config.initial_state.registers == {}
        assert config.console.raw_mode is True
        assert config.log_level == "WARNING"

    def test_parse_full(self):
        config = ConfigLoader().parse({
            "images": ["a.obj", "b.obj"],
            "initial_state": {"pc": "0x4000", "registers": {"R6": "xFE00", "r0": 7}},
            "console": {"raw_mode": False, "prompt": "? "},
            "logging": {"level": "debug"},
        })
        assert config.images == ["a.obj", "b.obj"]
        assert config.initial_state.pc == 0x4000
        assert config.initial_state.registers == {"r6": 0xFE00, "r0": 7}
        assert config.console.raw_mode is False
        assert config.console.prompt == "? "
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("data, message", [
        ({"initial_state": {"registers": {"r8": 0}}}, "Unknown register"),
        ({"initial_state": {"registers": {"pc": 0}}}, "Unknown register"),
        ({"initial_state": {"pc": 0x10000}}, "16-bit range"),
        ({"initial_state": {"pc": "zzz"}}, "Invalid integer"),
        ({"initial_state": {"pc": True}}, "Invalid integer"),
        ({"images": "prog.obj"}, "list"),
        ({"initial_state": [1]}, "'initial_state' must be a mapping"),
        ({"initial_state": {"registers": ["r0"]}}, "'registers' must be a mapping"),
        ({"console": "yes"}, "'console' must be a mapping"),
        ({"logging": "DEBUG"}, "'logging' must be a mapping"),
    ])
    def test_invalid_values(self, data, message):
        with pytest.raises(ConfigError, match=message):
            ConfigLoader().parse(data)

    def test_load_from_yaml_file(self, tmp_path):
        path = tmp_path / "lc3.yaml"
        path.write_text(
            "images: [prog.obj]\n"
            "initial_state:\n"
            "  pc: 0x3100\n"
            "  registers:\n"
            "    r6: 0xFE00\n"
            "logging:\n"
            "  level: INFO\n"
        )
        config = ConfigLoader().load_from_file(str(path))
        assert config.images == [str(tmp_path / "prog.obj")]
        assert config.initial_state.pc == 0x3100
        assert config.initial_state.registers == {"r6": 0xFE00}
        assert config.log_level == "INFO"

    def test_absolute_image_path_is_kept(self, tmp_path):
        image = tmp_path / "images" / "prog.obj"
        path = tmp_path / "conf" / "lc3.yaml"
        path.parent.mkdir()
        path.write_text(f"images: ['{image}']\n")
        assert ConfigLoader().load_from_file(str(path)).images == [str(image)]

    def test_empty_yaml_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        assert ConfigLoader().load_from_file(str(path)).images == []

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("images: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigLoader().load_from_file(str(path))

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigError, match="Cannot read"):
            ConfigLoader().load_from_file(str(tmp_path / "none.yaml"))


class TestSystemBuilder:
    def test_build_system(self, tmp_path):
        image = tmp_path / "prog.obj"
        image.write_bytes(bytes([0x31, 0x00, 0xF0, 0x23, 0xF0, 0x25]))  # IN / HALT
        config = SystemConfig(
            images=[str(image)],
            initial_state=CpuInitialState(pc=0x3100, registers={"r6": 0xFE00}),
        )
        config.console.prompt = "> "
        console = ScriptedConsole(b"x")

        cpu = SystemBuilder().build_system(config, console)
        assert cpu.get_state().pc == 0x3100
        assert cpu.get_state().get_register(6) == 0xFE00
        assert cpu.bus.peek(0x3100) == 0xF023

        cpu.run()
        assert console.output == "> x"
        assert cpu.get_state().get_register(0) == ord("x")
