"""
コマンドラインのエントリポイント。
オブジェクトイメージをロードし、HALTまでLC-3を実行します。
"""
import argparse
import logging
import sys
import time
from contextlib import nullcontext
from typing import List, Optional

from lc3_core.arch.lc3.cpu import Lc3Cpu
from lc3_core.common.errors import Lc3Error
from lc3_core.config.builder import SystemBuilder
from lc3_core.config.loader import ConfigLoader
from lc3_core.config.models import SystemConfig
from lc3_core.transport.console import Console

logger = logging.getLogger(__name__)


def _parse_address(value: str) -> int:
    try:
        return ConfigLoader().parse_word(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="lc3-core",
        description="Run LC-3 object images until HALT.",
    )
    parser.add_argument("images", nargs="*", metavar="IMAGE",
                        help="Object image file (origin word followed by contents)")
    parser.add_argument("--config", "-c", type=str, default=None,
                        help="YAML system configuration file")
    parser.add_argument("--pc", type=_parse_address, default=None,
                        help="Initial program counter (default: 0x3000)")
    parser.add_argument("--trials", type=int, default=1,
                        help="Run N independent trials restored from the same loaded state")
    parser.add_argument("--log-level", type=str, default=None,
                        help="Logging level (DEBUG, INFO, WARNING, ...)")
    return parser


# @intent:responsibility 同一のスナップショットから独立したVMを復元し、繰り返し実行します。
def run_trials(cpu: Lc3Cpu, trials: int, console: Console, prompt: str) -> List[float]:
    """
    各試行の経過時間（秒）のリストを返します。
    """
    snapshot = cpu.snapshot()
    elapsed = []
    for n in range(1, trials + 1):
        trial_cpu = Lc3Cpu.from_snapshot(snapshot, console, in_prompt=prompt)
        started = time.perf_counter()
        trial_cpu.resume()
        elapsed.append(time.perf_counter() - started)
        logger.info("Trial %d: %d instructions in %.6fs",
                    n, trial_cpu.instruction_count, elapsed[-1])
    return elapsed


def main(argv: Optional[List[str]] = None, console: Optional[Console] = None) -> int:
    """
    アプリケーションのメイン関数。終了ステータスを返します。
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error("--trials must be at least 1")

    try:
        config = ConfigLoader().load_from_file(args.config) if args.config else SystemConfig()
    except Lc3Error as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    level = getattr(logging, (args.log_level or config.log_level).upper(), None)
    if not isinstance(level, int):
        parser.error(f"unknown log level: {args.log_level or config.log_level}")
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    config.images.extend(args.images)
    if args.pc is not None:
        config.initial_state.pc = args.pc
    if not config.images:
        parser.error("no object image given")

    try:
        cpu = SystemBuilder().build_system(config, console)
        bus_console = cpu.bus.console
        raw = bus_console.raw_mode() if config.console.raw_mode else nullcontext()
        with raw:
            if args.trials > 1:
                run_trials(cpu, args.trials, bus_console, config.console.prompt)
            else:
                cpu.run()
    except Lc3Error as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        print("Interrupted.", file=sys.stderr)
        return 130
    return 0


if __name__ == '__main__':
    sys.exit(main())
