import argparse
import logging
import sys

from rich.logging import RichHandler

from page_sim import CommandLineInterface, PageReplacementSimulator, SimulatorConfig
from page_sim.config import LOG_LEVELS


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compare FIFO, LRU, Clock and Optimal page replacement on a reference string."
    )
    parser.add_argument("sequence", nargs="?", help="page references, e.g. '7,0,1,2,0,3'")
    parser.add_argument("frames", nargs="?", type=int, help="number of frames")
    parser.add_argument("--verbose", action="store_true", help="show the step by step tables")
    parser.add_argument("--chart", action="store_true", help="show a fault count bar chart")
    parser.add_argument("--timeline", action="store_true", help="show the simulator event timeline")
    parser.add_argument("--parallel", action="store_true", help="run the policies in threads")
    parser.add_argument("--policies", help="comma separated subset of fifo,lru,clock,opt")
    parser.add_argument("--log-level", dest="log_level", type=str.upper, choices=LOG_LEVELS,
                        help="logging level (default WARNING)")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.sequence is not None and args.frames is None:
        parser.error("frames is required when a sequence is given")
    cfg = SimulatorConfig.from_args(args)
    logging.basicConfig(
        level=cfg.log_level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)]
    )
    cli = CommandLineInterface(PageReplacementSimulator())
    if args.sequence is None:
        cli.run()
        return 0
    return 0 if cli.execute(cfg) is not None else 2


if __name__ == "__main__":
    sys.exit(main())
