from rich.console import Console, Group
from rich.table import Table
from rich.panel import Panel
from rich import box

from . import config
from .errors import PageSimError
from .records import EMPTY
from .simulator import PageReplacementSimulator


class CommandLineInterface:
    def __init__(self, simulator=None, console=None, chart_width=config.CHART_WIDTH):
        self.simulator = simulator or PageReplacementSimulator()
        self.console = console or Console()
        self.chart_width = chart_width
        self.palette = {
            'primary': 'cyan',
            'success': 'green',
            'warning': 'yellow',
            'danger': 'red',
            'muted': 'bright_black'
        }
        self.policy_colors = {
            'FIFO': 'cyan',
            'LRU': 'magenta',
            'Clock': 'yellow',
            'Optimal': 'green'
        }
        self.category_colors = {
            'PARSE': 'blue',
            'RUN': 'cyan',
            'POLICY': 'magenta',
            'ERROR': 'red'
        }

    def execute(self, cfg):
        """Run one simulation described by ``cfg`` and print the requested views.

        Returns the results, or None when the input was rejected.
        """
        try:
            results = self.simulator.run_text(cfg.sequence, cfg.frames,
                                              policies=cfg.policies, parallel=cfg.parallel)
        except PageSimError as exc:
            self._print(self._styled_feedback(str(exc), success=False))
            return None
        self._print(self._summary(results))
        if cfg.verbose:
            self._print(self._step_tables(results, cfg.frames))
        if cfg.chart:
            self._print(self._fault_chart(results))
        if cfg.timeline:
            self._print(self._timeline())
        return results

    def run(self):
        """Prompt for a sequence and frame count until a run succeeds."""
        self._render_banner()
        while True:
            try:
                sequence = input(f"Page sequence (e.g. {config.DEFAULT_SEQUENCE}): ").strip()
                if sequence.lower() in ("exit", "quit"):
                    return None
                frames_raw = input("Number of frames: ").strip()
                verbose = input("Show step by step? (y/n): ").strip().lower().startswith("y")
                chart = input("Show chart? (y/n): ").strip().lower().startswith("y")
            except (KeyboardInterrupt, EOFError):
                self._print("\nExiting simulator...")
                return None
            frames = self._parse_frames(frames_raw)
            if frames is None:
                self._print(self._styled_feedback(f"Invalid frame count: {frames_raw!r}", success=False))
                continue
            cfg = config.SimulatorConfig(
                sequence=sequence or config.DEFAULT_SEQUENCE,
                frames=frames,
                verbose=verbose,
                chart=chart
            )
            results = self.execute(cfg)
            if results is not None:
                return results

    def _parse_frames(self, raw):
        if not raw:
            return config.DEFAULT_FRAMES
        try:
            return int(raw)
        except ValueError:
            return None

    def _summary(self, results):
        table = Table(
            title="Summary (page faults per policy)",
            header_style="bold cyan",
            box=box.SIMPLE_HEAVY
        )
        table.add_column("Policy", style="bold")
        table.add_column("Faults", justify="right")
        table.add_column("Hits", justify="right")
        table.add_column("Fault rate", justify="right")
        for r in results:
            color = self.policy_colors.get(r.policy_name, 'white')
            table.add_row(
                f"[{color}]" + r.policy_name + "[/]",
                str(r.total_faults),
                str(r.total_hits),
                f"{r.fault_rate * 100:.1f}%"
            )
        return table

    def _step_tables(self, results, frames):
        tables = []
        for r in results:
            table = Table(
                title=f"{r.policy_name} step by step",
                caption=f"Total faults: {r.total_faults}",
                box=box.ROUNDED,
                row_styles=["none", "dim"]
            )
            table.add_column("Ref", justify="right", style="bold")
            for i in range(frames):
                table.add_column(f"F{i}", justify="center")
            table.add_column("Fault", justify="center")
            for step in r.steps:
                cells = ["-" if page is EMPTY else str(page) for page in step.snapshot]
                mark = "[red]*[/]" if step.fault else " "
                table.add_row(str(step.reference), *cells, mark)
            tables.append(table)
        return Group(*tables)

    def _fault_chart(self, results):
        peak = max((r.total_faults for r in results), default=0)
        grid = Table.grid(padding=(0, 1))
        grid.add_column(justify="left", style="bold")
        grid.add_column(justify="left")
        for r in results:
            color = self.policy_colors.get(r.policy_name, 'blue')
            grid.add_row(r.policy_name, self._build_bar(r.total_faults, peak, color=color))
        return Panel(grid, title="Page fault comparison", border_style="blue", box=box.ROUNDED)

    def _timeline(self):
        events = self.simulator.get_timeline()
        table = Table(
            title="Timeline",
            box=box.SIMPLE_HEAVY,
            header_style="bold white",
            row_styles=["dim", "none"]
        )
        table.add_column("#", justify="right")
        table.add_column("Time")
        table.add_column("Type")
        table.add_column("Detail")
        for e in events:
            color = self.category_colors.get(e['category'], 'white')
            table.add_row(
                str(e['step']),
                e['timestamp'].strftime("%H:%M:%S"),
                f"[{color}]" + e['category'] + "[/]",
                e['message']
            )
        return table

    def _build_bar(self, value, peak, color="blue"):
        filled = int(round(self.chart_width * value / peak)) if peak else 0
        empty = self.chart_width - filled
        return f"[{color}]" + "█" * filled + "[/]" + "·" * empty + f" {value}"

    def _styled_feedback(self, message, success=True, title=None):
        style = self.palette['success'] if success else self.palette['danger']
        panel_title = title or ("OK" if success else "Error")
        return Panel(message, title=panel_title, border_style=style, box=box.ROUNDED)

    def _render_banner(self):
        banner_text = "[bold cyan]PAGE REPLACEMENT SIMULATOR[/]\n[bright_black]FIFO • LRU • Clock • Optimal[/]"
        self._print(Panel(banner_text, border_style=self.palette['primary'], padding=(1, 2), box=box.DOUBLE))

    def _print(self, message):
        self.console.print(message)
