"""Console reporter: BrokenRulesResponse -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.tree import Tree

from boframe.domain.model.broken_rules_output import ChildEntry, CollectionEntry, NoticeEntry
from boframe.domain.model.enums import RuleSeverity

if TYPE_CHECKING:
    from boframe.domain.model.broken_rules_output import BrokenRulesOutput
    from boframe.domain.model.broken_rules_response import BrokenRulesResponse

# Severity -> rich style of its notices
SEVERITY_STYLES: dict[RuleSeverity, str] = {
    RuleSeverity.SUCCESS: "green",
    RuleSeverity.INFORMATION: "cyan",
    RuleSeverity.WARNING: "yellow",
    RuleSeverity.ERROR: "bold red",
}


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        width: Console width in characters.
        min_severity: Hide notices below this severity. None = show all.
    """

    width: int = 120
    min_severity: RuleSeverity | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width <= 0:
            raise ValueError("width must be positive")


_ORDER = (RuleSeverity.SUCCESS, RuleSeverity.INFORMATION, RuleSeverity.WARNING, RuleSeverity.ERROR)


class ConsoleReporter:
    """Console reporter: renders the broken-rules tree with colors.

    Output is str, not print(). Caller decides destination.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, response: BrokenRulesResponse) -> str:
        """Format a response as rich formatted string.

        Args:
            response: Response to format.

        Returns:
            Formatted string with header and tree.
        """
        output = StringIO()
        console = Console(
            file=output, force_terminal=True, highlight=False, width=self._config.width
        )

        console.print()
        console.rule(f"[bold]{response.name}[/bold] ({response.status})")
        console.print()
        console.print(f"[bold]{response.message}[/bold] notices: {response.count}")
        console.print()

        tree = Tree("[bold]model[/bold]")
        self._render_node(tree, response.data)
        console.print(tree)
        console.print()
        return output.getvalue()

    def _render_node(self, tree: Tree, node: BrokenRulesOutput) -> None:
        """Render entries of one node below a tree branch."""
        for name, entry in node.entries.items():
            match entry:
                case NoticeEntry(notices=notices):
                    branch = tree.add(f"[bold]{name}[/bold]")
                    for notice in notices:
                        if self._is_shown(notice.severity):
                            style = SEVERITY_STYLES[notice.severity]
                            label = f"[{style}]{notice.severity.value}[/{style}]"
                            branch.add(f"{label} {notice.message}")
                case ChildEntry(output=output):
                    self._render_node(tree.add(f"[yellow]{name}[/yellow]"), output)
                case CollectionEntry(items=items):
                    branch = tree.add(f"[yellow]{name}[/yellow] [dim]({len(items)} items)[/dim]")
                    for key, item in items.items():
                        self._render_node(branch.add(f"[dim]#{key}[/dim]"), item)

    def _is_shown(self, severity: RuleSeverity) -> bool:
        """Check severity against the configured minimum."""
        minimum = self._config.min_severity
        return minimum is None or _ORDER.index(severity) >= _ORDER.index(minimum)
