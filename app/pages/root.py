"""Root landing page listing the job history query routes."""

from html import escape

_ROUTES = (
    ("/api/v1/job/{cluster}/{jobId}", "One job with configuration and counters"),
    ("/api/v1/jobFlow/{cluster}/{jobId}", "The flow a job belongs to"),
    ("/api/v1/flow/{cluster}/{user}/{appId}[/{version}]", "Latest flows of an app"),
    ("/api/v1/flowStats/{cluster}/{user}/{appId}", "Paginated flow statistics (startCursor / nextCursor)"),
    ("/api/v1/appVersion/{cluster}/{user}/{appId}", "Distinct versions of an app"),
    ("/api/v1/hdfs/{cluster}", "Directory usage for one hourly bucket"),
    ("/api/v1/hdfs/path/{cluster}/{attribute}", "One attribute of one path over time"),
)


def render_root_page(app_name: str) -> str:
    """Return HTML for the root landing page."""
    rows = "\n".join(
        f"<tr><td><code>{escape(path)}</code></td><td>{escape(desc)}</td></tr>"
        for path, desc in _ROUTES
    )
    name = escape(app_name)
    return f"""
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{name}</title>
    <style>
        body {{
            font-family: system-ui, sans-serif;
            margin: 0;
            background: #000;
            color: #e0e0e0;
            padding: 2rem 1rem;
        }}
        .wrap {{ max-width: 760px; margin: 0 auto; }}
        h1 {{ font-weight: 600; color: #fff; }}
        p {{ color: #999; line-height: 1.55; }}
        table {{ border-collapse: collapse; width: 100%; margin: 1rem 0; }}
        td {{ border-top: 1px solid #1a1a1a; padding: 0.5rem; vertical-align: top; }}
        code {{ font-family: monospace; color: #b0b0b0; }}
        a.btn {{
            display: inline-block;
            padding: 0.6rem 1.2rem;
            margin-right: 0.5rem;
            background: #222;
            color: #e0e0e0;
            text-decoration: none;
            border: 1px solid #333;
        }}
    </style>
</head>
<body>
    <div class="wrap">
        <h1>{name}</h1>
        <p>Read-only API over job history: jobs, flows, flow statistics and
        HDFS directory usage. All routes are GET and live under <code>/api/v1</code>.</p>
        <table>
{rows}
        </table>
        <a href="/docs" class="btn">Open API docs (Swagger)</a>
        <a href="/redoc" class="btn">ReDoc</a>
    </div>
</body>
</html>
""".strip()
