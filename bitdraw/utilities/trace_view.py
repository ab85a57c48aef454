"""
Rich-based rendering of recorded traces.

Shows the group tree of one generation with the raw draws under each
group, for debugging generators and inspecting what a shrinker will see.
"""

from rich.console import Console
from rich.text import Text
from rich.tree import Tree

from ..domain.group import Group, Trace

COLORS = {
    "label": "#00d4ff",
    "forced": "#ffd93d",
    "discard": "#ff6b6b",
    "draw": "#00d26a",
    "muted": "#6c757d",
}


def _group_text(g: Group) -> Text:
    text = Text()
    text.append(g.label, style=COLORS["label"])
    text.append(f" [{g.begin}, {g.end})", style=COLORS["muted"])
    if g.forced:
        text.append(" forced", style=COLORS["forced"])
    if g.discard:
        text.append(" discard", style=COLORS["discard"])
    return text


def _draw_text(index: int, width: int, value: int) -> Text:
    return Text(f"#{index} {value} ({width} bits)", style=COLORS["draw"])


def _add_group(node: Tree, trace: Trace, g: Group, show_draws: bool) -> None:
    branch = node.add(_group_text(g))
    children = trace.children(g)
    position = g.begin
    for child in children:
        if show_draws:
            for i in range(position, child.begin):
                branch.add(_draw_text(i, *trace.draws[i]))
        _add_group(branch, trace, child, show_draws)
        position = child.end
    if show_draws:
        for i in range(position, g.end):
            branch.add(_draw_text(i, *trace.draws[i]))


def render_trace(trace: Trace, title: str = "trace", show_draws: bool = True) -> Tree:
    """
    Build a rich Tree of the trace's groups.

    Args:
        trace: Recorded trace to render
        title: Root label
        show_draws: Include raw draws as leaves

    Returns:
        Tree renderable
    """
    root = Tree(Text(f"{title}: {len(trace)} draws, {trace.total_bits} bits", style="bold"))
    position = 0
    for g in trace.roots():
        if show_draws:
            for i in range(position, g.begin):
                root.add(_draw_text(i, *trace.draws[i]))
        _add_group(root, trace, g, show_draws)
        position = g.end
    if show_draws:
        for i in range(position, len(trace)):
            root.add(_draw_text(i, *trace.draws[i]))
    return root


def print_trace(trace: Trace, console: Console | None = None, **kwargs) -> None:
    """Print a trace's group tree to the console."""
    (console or Console()).print(render_trace(trace, **kwargs))
