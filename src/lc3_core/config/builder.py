import logging
from typing import Optional

from lc3_core.arch.lc3.cpu import Lc3Cpu
from lc3_core.transport.console import Console, StdConsole
from .models import SystemConfig, CpuInitialState

logger = logging.getLogger(__name__)


# @intent:responsibility システム構成（Config）に基づいて、Bus、Console、CPUを生成・接続し、初期状態を適用します。
class SystemBuilder:
    def build_system(self, config: SystemConfig, console: Optional[Console] = None) -> Lc3Cpu:
        if console is None:
            console = StdConsole()

        cpu = Lc3Cpu.create(console, in_prompt=config.console.prompt)
        self.apply_initial_state(cpu, config.initial_state)

        for image in config.images:
            origin = cpu.load_file(image)
            logger.info("Image %s loaded at %#06x", image, origin)

        return cpu

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    def apply_initial_state(self, cpu: Lc3Cpu, config_state: CpuInitialState) -> None:
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        """
        cpu.reset()
        state = cpu.get_state()
        state.pc = config_state.pc
        for reg_name, value in config_state.registers.items():
            state.set_register(int(reg_name[1:]), value)
