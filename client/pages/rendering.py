import os
from typing import Any

from fastapi.templating import Jinja2Templates

BASE_DIR = os.path.dirname(os.path.abspath(__file__))
TEMPLATES_DIR = os.path.join(BASE_DIR, "..", "templates")

templates = Jinja2Templates(directory=TEMPLATES_DIR)


def render_template(name: str, **context: Any) -> str:
    return templates.env.get_template(name).render(**context)
