from dataclasses import dataclass, field
from typing import Dict, List

from lc3_core.arch.lc3.traps import DEFAULT_IN_PROMPT
from lc3_core.common.types import PC_START


@dataclass
class CpuInitialState:
    pc: int = PC_START
    registers: Dict[str, int] = field(default_factory=dict)  # 例: {"r6": 0xFE00}


@dataclass
class ConsoleConfig:
    raw_mode: bool = True  # 端末の場合、実行中はcbreakモードにする
    prompt: str = DEFAULT_IN_PROMPT


@dataclass
class SystemConfig:
    images: List[str] = field(default_factory=list)
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
    console: ConsoleConfig = field(default_factory=ConsoleConfig)
    log_level: str = "WARNING"
