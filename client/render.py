from dataclasses import dataclass

from client.models import RemoteTask

CATEGORY_ICONS = {
    "work": "💼",
    "urgent": "🚨",
    "personal": "👤",
}
DEFAULT_ICON = "📝"


@dataclass(frozen=True)
class TaskRow:
    task_id: int
    title: str
    checked: bool
    css_class: str
    category: str
    category_icon: str
    category_class: str


def task_row(task: RemoteTask) -> TaskRow:
    return TaskRow(
        task_id=task.id,
        title=task.title,
        checked=task.completed,
        css_class="task-item completed" if task.completed else "task-item",
        category=task.category,
        category_icon=CATEGORY_ICONS.get(task.category, DEFAULT_ICON),
        category_class=f"task-category task-category--{task.category}",
    )


def format_row(row: TaskRow) -> str:
    box = "[x]" if row.checked else "[ ]"
    return f"{box} #{row.task_id:<3} {row.category_icon} {row.category:<8} {row.title}"


def render_board(tasks: list[RemoteTask], loading: bool = False, error: str | None = None) -> list[str]:
    """Board state to display lines: error banner first, then the list or the loading indicator."""
    lines: list[str] = []
    if error:
        lines.append(f"! {error}")
    if loading:
        lines.append("Loading tasks...")
        return lines
    if not tasks:
        lines.append("No tasks yet.")
        return lines
    lines.extend(format_row(task_row(task)) for task in tasks)
    return lines
