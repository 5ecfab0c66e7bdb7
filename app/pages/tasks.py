"""Task pages: list with search, detail, create/edit form, not found."""

from collections.abc import Iterable, Mapping, Sequence
from enum import Enum
from html import escape

from app.application.dtos.task import Task
from app.domain.enums import TaskStatus
from app.pages.layout import render_page


class FormMode(str, Enum):
    """Whether the task form creates a new task or edits an existing one."""

    CREATE = "CREATE"
    EDIT = "EDIT"


def _status_badge(status: TaskStatus) -> str:
    return f'<span class="status {status.value}">{status.value}</span>'


def _error_lines(errors: Mapping[str, Sequence[str]], field: str) -> str:
    return "".join(f'<p class="error">{escape(msg)}</p>' for msg in errors.get(field, ()))


def render_task_list(
    tasks: Sequence[Task],
    summary: str | None = None,
    checked_statuses: Iterable[str] = (),
    errors: Mapping[str, Sequence[str]] | None = None,
) -> str:
    """Return the task list page with the search form pre-filled and any query errors."""
    errors = errors or {}
    checked = set(checked_statuses)
    checkboxes = "".join(
        f'<label><input type="checkbox" name="status" value="{s}"'
        f'{" checked" if s in checked else ""}> {s}</label>'
        for s in TaskStatus.values()
    )
    if tasks:
        rows = "".join(
            f"<tr><td>{t.id}</td>"
            f'<td><a href="/tasks/{t.id}">{escape(t.summary)}</a></td>'
            f"<td>{_status_badge(t.status)}</td></tr>"
            for t in tasks
        )
        table = (
            "<table><thead><tr><th>ID</th><th>概要</th><th>ステータス</th></tr></thead>"
            f"<tbody>{rows}</tbody></table>"
        )
    else:
        table = '<p class="empty">タスクがありません</p>'
    body = f"""
        <section class="card">
            <form method="get" action="/tasks">
                <label for="summary">概要</label>
                <input type="text" id="summary" name="summary" value="{escape(summary or '')}">
                <div class="inline"><label>ステータス</label>{checkboxes}</div>
                {_error_lines(errors, "status")}
                <div class="actions"><button type="submit">検索</button></div>
            </form>
        </section>
        <section class="card">{table}</section>
    """
    return render_page("タスク一覧", body)


def render_task_detail(task: Task) -> str:
    """Return the detail page for one task with edit and delete actions."""
    description = escape(task.description) if task.description else '<span class="empty">なし</span>'
    body = f"""
        <section class="card">
            <p>ID: {task.id}</p>
            <h2>{escape(task.summary)}</h2>
            <p>{_status_badge(task.status)}</p>
            <p style="white-space: pre-wrap">{description}</p>
            <div class="actions">
                <a class="btn" href="/tasks/{task.id}/editForm">編集</a>
                <form method="post" action="/tasks/{task.id}/delete">
                    <button type="submit" class="danger">削除</button>
                </form>
                <a class="btn secondary" href="/tasks">一覧へ戻る</a>
            </div>
        </section>
    """
    return render_page("タスク詳細", body)


def render_task_form(
    mode: FormMode,
    values: Mapping[str, str | None] | None = None,
    errors: Mapping[str, Sequence[str]] | None = None,
    task_id: int | None = None,
) -> str:
    """Return the create/edit form, re-populated with values and field errors."""
    values = values or {}
    errors = errors or {}
    current_status = values.get("status") or ""
    options = "".join(
        f'<option value="{s}"{" selected" if s == current_status else ""}>{s}</option>'
        for s in TaskStatus.values()
    )
    if mode is FormMode.EDIT:
        title, action, submit = "タスク編集", f"/tasks/{task_id}", "更新"
        cancel = f"/tasks/{task_id}"
    else:
        title, action, submit = "タスク作成", "/tasks", "作成"
        cancel = "/tasks"
    body = f"""
        <section class="card">
            <form method="post" action="{action}" data-mode="{mode.value}">
                <label for="summary">概要</label>
                <input type="text" id="summary" name="summary" value="{escape(values.get('summary') or '')}">
                {_error_lines(errors, "summary")}
                <label for="description">詳細</label>
                <textarea id="description" name="description">{escape(values.get('description') or '')}</textarea>
                {_error_lines(errors, "description")}
                <label for="status">ステータス</label>
                <select id="status" name="status">
                    <option value="">--</option>
                    {options}
                </select>
                {_error_lines(errors, "status")}
                <div class="actions">
                    <button type="submit">{submit}</button>
                    <a class="btn secondary" href="{cancel}">キャンセル</a>
                </div>
            </form>
        </section>
    """
    return render_page(title, body)


def render_not_found_page(message: str = "Not found") -> str:
    """Return the page shown for an unknown task id."""
    body = f"""
        <section class="card">
            <p>指定されたタスクが見つかりません</p>
            <p class="empty">{escape(message)}</p>
            <div class="actions"><a class="btn secondary" href="/tasks">一覧へ戻る</a></div>
        </section>
    """
    return render_page("Not Found", body)
