"""Shared HTML shell (head, styles, header) for server-rendered pages."""

from html import escape

_STYLES = """
        * { box-sizing: border-box; }
        body {
            font-family: system-ui, sans-serif;
            margin: 0;
            min-height: 100vh;
            background: #fafafa;
            color: #222;
            padding: 2rem 1rem;
        }
        .wrap { max-width: 760px; margin: 0 auto; }
        header.top { display: flex; align-items: baseline; gap: 1rem; margin-bottom: 1.5rem; }
        header.top h1 { font-size: 1.5rem; margin: 0; }
        header.top a { color: #555; text-decoration: none; }
        .card {
            background: #fff;
            border: 1px solid #e2e2e2;
            padding: 1.25rem 1.5rem;
            margin-bottom: 1.25rem;
        }
        table { width: 100%; border-collapse: collapse; }
        th, td { text-align: left; padding: 0.5rem; border-bottom: 1px solid #eee; }
        .status { font-family: monospace; font-size: 0.85rem; }
        .status.TODO { color: #b15c00; }
        .status.DOING { color: #0a58ca; }
        .status.DONE { color: #2d7a2d; }
        label { display: block; font-weight: 600; margin: 0.75rem 0 0.25rem; }
        input[type=text], textarea, select { width: 100%; padding: 0.4rem; font: inherit; }
        textarea { min-height: 6rem; }
        .inline label { display: inline; font-weight: normal; margin-right: 0.75rem; }
        .error { color: #c62828; font-size: 0.875rem; margin: 0.25rem 0 0; }
        .actions { display: flex; gap: 0.75rem; margin-top: 1rem; align-items: center; }
        button, a.btn {
            padding: 0.45rem 1rem;
            border: 1px solid #333;
            background: #333;
            color: #fff;
            text-decoration: none;
            font: inherit;
            cursor: pointer;
        }
        a.btn.secondary, button.secondary { background: #fff; color: #333; }
        button.danger { background: #c62828; border-color: #c62828; }
        .empty { color: #888; }
"""


def render_page(title: str, body: str) -> str:
    """Return a full HTML document with the shared header and styles.

    body is inserted as-is; callers escape user content.
    """
    return f"""<!DOCTYPE html>
<html lang="ja">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)}</title>
    <style>{_STYLES}</style>
</head>
<body>
    <div class="wrap">
        <header class="top">
            <h1>{escape(title)}</h1>
            <a href="/tasks">タスク一覧</a>
            <a href="/tasks/creationForm">新規作成</a>
        </header>
        {body}
    </div>
</body>
</html>
"""
