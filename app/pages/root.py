"""Root landing page with links to the task views and API documentation."""

from html import escape

from app.pages.layout import render_page


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    body = f"""
        <section class="card">
            <p>{escape(app_name)} はシンプルなタスク管理アプリです。</p>
            <div class="actions">
                <a class="btn" href="/tasks">タスク一覧</a>
                <a class="btn secondary" href="/docs">API ドキュメント</a>
            </div>
        </section>
        <section class="card">
            <p>JSON API: <code>GET /api/tasks?summary=&amp;status=TODO&amp;status=DOING</code></p>
            <p>Run locally with: <code>uvicorn app.main:app --reload</code></p>
        </section>
    """
    return render_page(app_name, body)
