# scripts/render.py
import os
import tempfile
from contextlib import contextmanager

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup

TEMPLATE_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "dashboard_templates")
TEMPLATE_NAME = "template.html"
CLIENT_SCRIPT = "dashboard.js"

def _env():
    return Environment(loader=FileSystemLoader(TEMPLATE_DIR), autoescape=select_autoescape(["html"]))

def client_script():
    # Static page logic; the only thing it reads is the embedded `state` object.
    with open(os.path.join(TEMPLATE_DIR, CLIENT_SCRIPT), "r", encoding="utf-8") as f:
        return Markup(f.read())

def render_dashboard(ctx):
    tpl = _env().get_template(TEMPLATE_NAME)
    return tpl.render(client_script=client_script(), **ctx)

@contextmanager
def _atomic_path(path):
    """Yield a temp path beside `path`; it replaces `path` on success and is removed on failure."""
    d = os.path.dirname(os.path.abspath(path))
    os.makedirs(d, exist_ok=True)
    fd, tmp = tempfile.mkstemp(prefix=".brain-dashboard-", suffix=".tmp", dir=d)
    os.close(fd)
    try:
        yield tmp
        os.chmod(tmp, 0o644)
        os.replace(tmp, path)
    finally:
        if os.path.exists(tmp):
            os.remove(tmp)

def write_dashboard(path, html):
    with _atomic_path(path) as tmp:
        with open(tmp, "w", encoding="utf-8") as f:
            f.write(html)
    return path
